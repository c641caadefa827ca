"""
The most-fundamental classes of the syntax-tree hierarchy live apart
from the concrete node kinds, so that the stacking and scope modules
can refer to categories of node without importing every kind.

The parser builds the tree; this package only borrows it.
Offsets are character positions in the program's source text.
"""

class Node:
	def idx0(self) -> int:
		""" Return the offset of the leftmost character of this node """
		raise NotImplementedError(type(self))
	def kind(self) -> str: return type(self).__name__
	def __repr__(self): return "<%s>" % self.kind()

class Expression(Node): pass

class Statement(Node): pass

class Declaration:
	"""
	Declarations hang off the scope-introducing nodes.
	They are not visited; the walker only reads them to build a scope.
	"""
	pass
