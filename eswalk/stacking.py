"""
The ancestor stack: a tuple of Metadata frames, outermost first,
from the synthetic root frame down to the node being visited.

Each walk builds its own stack by appending one frame to its parent's,
so the tuple a visitor receives stays valid for as long as it cares to keep it,
and siblings never see each other's frames.
"""
from typing import Any, Optional
from .ontology import Node, Statement
from .syntax import Program, FunctionLiteral
from .space import Variables

class Metadata:
	"""
	What the walker knows about one node. Scope-introducing nodes get
	a table of declared names; visitors may stash whatever else they like.
	"""
	node: Optional[Node]
	scope: Optional[Variables]

	def __init__(self, node:Optional[Node]):
		self.node = node
		self.scope = None
		self._notes = {}

	def __getitem__(self, key:str) -> Any: return self._notes[key]
	def __setitem__(self, key:str, value:Any): self._notes[key] = value
	def __contains__(self, key:str) -> bool: return key in self._notes
	def get(self, key:str, default=None): return self._notes.get(key, default)

	def __repr__(self):
		return "{node:%s@%x}" % (type(self.node).__name__, id(self.node))

STACK = tuple[Metadata, ...]

def current_metadata(stack:STACK) -> Optional[Metadata]:
	return stack[-1] if stack else None

def parent_metadata(stack:STACK) -> Optional[Metadata]:
	return stack[-2] if len(stack) > 1 else None

def _is_statement(node, or_program:bool) -> bool:
	if isinstance(node, Statement): return True
	return or_program and isinstance(node, Program)

def _ith_statement_depth(stack:STACK, i:int) -> Optional[int]:
	# A program counts as a statement here, so the outermost answer is the root.
	for depth in range(len(stack)-1, -1, -1):
		if _is_statement(stack[depth].node, True):
			if i == 0: return depth
			i -= 1

def find_ith_parent_statement(stack:STACK, i:int) -> Optional[Node]:
	depth = _ith_statement_depth(stack, i)
	if depth is not None: return stack[depth].node

def find_ith_parent_statement_metadata(stack:STACK, i:int) -> Optional[STACK]:
	""" The stack as it stood when that statement was visited. """
	depth = _ith_statement_depth(stack, i)
	if depth is not None: return stack[:depth+1]

def find_parent_statement(stack:STACK) -> Optional[Statement]:
	for md in reversed(stack):
		if _is_statement(md.node, False): return md.node

def find_parent_function(stack:STACK) -> Optional[FunctionLiteral]:
	for md in reversed(stack):
		if isinstance(md.node, FunctionLiteral): return md.node
