"""
The walker drives one traversal of a tree under a given visitor.

It keeps the ancestor stack, collects scopes as it descends, calls the
visitor's hooks around every node, and can optionally stand as a fault
boundary around the whole walk.
"""
import sys
from typing import Any, Optional
from . import syntax
from .diagnostics import Report
from .hooks import Hook
from .location import Position
from .ontology import Node
from .space import collect_scope
from .stacking import STACK, Metadata, current_metadata
from .visitor import DefaultVisitor

# Each level of nesting costs the interpreter a few frames.
RECURSION_LIMIT = 10_000

class MalformedTree(Exception):
	""" A child the tree promised is not there. """

class Walker:
	visitor: DefaultVisitor
	report: Report
	current: Optional[Node]
	parent: Optional[Node]
	program: Optional[syntax.Program]

	def __init__(self, visitor:DefaultVisitor, report:Report=None, catch_faults:bool=False):
		self.visitor = visitor
		self.report = report if report is not None else Report()
		self.catch_faults = catch_faults
		self.current = self.parent = None
		self.program = None

	def position(self, idx:int) -> Optional[Position]:
		if self.program is None or self.program.file is None: return None
		return self.program.file.position(idx)

	def begin(self, root:Node) -> Optional[Metadata]:
		"""
		Walk the whole tree from root, then tell every hook it's over.
		Under the fault boundary a broken walk answers None,
		and the report explains what happened.
		"""
		self.report.info("Walking", root, "with", type(self.visitor).__name__)
		self.current = self.parent = None
		self.program = None
		limit = sys.getrecursionlimit()
		sys.setrecursionlimit(max(limit, RECURSION_LIMIT))
		try:
			return self._begin(root)
		except Exception as ex:
			if not self.catch_faults: raise
			self._fault(root, ex)
			return None
		finally:
			sys.setrecursionlimit(limit)

	def _begin(self, root:Node) -> Optional[Metadata]:
		result = self.walk(root, (Metadata(None),))
		for hook in self.visitor.hooks:
			if hook.on_complete is not None:
				self._call(hook, "on_complete", root, result)
		return result

	def walk(self, node:Node, stack:STACK) -> Optional[Metadata]:
		self.current = node
		above = current_metadata(stack)
		self.parent = above.node if above is not None else None

		if node is None:
			raise MalformedTree(self.parent)
		if type(node) not in syntax.NODE_KINDS:
			return None

		md = Metadata(node)
		if isinstance(node, syntax.SCOPE_KINDS):
			collect_scope(md, node.declaration_list)
		stack = stack + (md,)

		for hook in self.visitor.hooks:
			if hook.on_enter is not None:
				self._call(hook, "on_enter", node, stack)

		if isinstance(node, syntax.Program):
			self.program = node
		result = self.visitor.visit(node, self, stack)

		for hook in self.visitor.hooks:
			if hook.on_leave is not None:
				self._call(hook, "on_leave", node, stack)

		return result

	def _call(self, hook:Hook, slot:str, node:Node, arg:Any):
		try:
			outcome = getattr(hook, slot)(node, arg)
		except Exception as ex:
			outcome = ex
		if outcome is not None:
			self.report.hook_failed(slot, node, outcome)

	def _fault(self, root:Node, ex:Exception):
		culprit = self.current if self.current is not None else self.parent
		position, idx, source = None, None, None
		if isinstance(root, syntax.Program) and root.file is not None:
			source = root.file
			for suspect in (self.current, self.parent):
				idx = _start_of(suspect)
				if idx is not None:
					position = source.position(idx)
					break
		kind = culprit.kind() if isinstance(culprit, Node) else None
		self.report.fault(kind, position, ex, source, idx)

def _start_of(node) -> Optional[int]:
	# A malformed node may be unable to say where it starts.
	if not isinstance(node, Node): return None
	try: return node.idx0()
	except (AttributeError, TypeError, IndexError):
		return None
