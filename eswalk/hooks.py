"""
Lifecycle callbacks a visitor carries along for the walker to call.

Any slot may be left empty. A callback that returns something other than None,
or raises, has failed; the walker files that with its report and keeps walking.
"""
from typing import Any, Callable, Optional
from .ontology import Node
from .stacking import Metadata, STACK

ON_NODE = Callable[[Node, STACK], Any]
ON_FINISHED = Callable[[Node, Optional[Metadata]], Any]

class Hook:
	def __init__(self, on_enter:ON_NODE=None, on_leave:ON_NODE=None, on_complete:ON_FINISHED=None):
		self.on_enter = on_enter
		self.on_leave = on_leave
		self.on_complete = on_complete

class Breadcrumbs(Hook):
	"""
	Remembers the kind and depth of every node entered, in order.
	Depth counts the synthetic root frame, so the root itself is at depth 2.
	"""
	def __init__(self):
		super().__init__(on_enter=self._enter, on_complete=self._finish)
		self.trail: list[tuple[int, str]] = []
		self.finished = 0

	def _enter(self, node:Node, stack:STACK):
		self.trail.append((len(stack), node.kind()))

	def _finish(self, root:Node, md:Optional[Metadata]):
		self.finished += 1

	def kinds(self) -> list[str]:
		return [kind for _, kind in self.trail]

	def render(self) -> str:
		return "\n".join("  "*(depth-2) + kind for depth, kind in self.trail)

class ScopeCensus(Hook):
	""" Keeps every frame that carries a scope, in the order they were entered. """
	def __init__(self):
		super().__init__(on_enter=self._enter)
		self.frames: list[Metadata] = []

	def _enter(self, node:Node, stack:STACK):
		if stack[-1].scope is not None:
			self.frames.append(stack[-1])
