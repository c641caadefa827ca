"""
Rewrite the tree in place so that every control-flow body is a block.

The rewrite happens just before the inherited operation walks into the node,
so the traversal always descends into a block, never a bare statement.
Bodies that are already blocks are left alone, which makes a second run a no-op.

NB: An absent `else` or `finally` comes out as an empty block.
NB: Downstream passes must treat those as present-but-empty.
NB: Any other absent body stays absent, and the walk reports the tree as malformed.

Case clauses get the same treatment as everything else: the statements of a
consequent move into a single block, which becomes the whole consequent.
A `break` inside that block still leaves the switch, so meaning is unchanged.
"""
from typing import Optional, Sequence, Union
from . import syntax
from .ontology import Statement
from .stacking import STACK
from .visitor import DefaultVisitor
from .walker import Walker

BODY = Union[None, Statement, Sequence[Statement]]

def as_block(body:BODY, idx:int=None) -> syntax.BlockStatement:
	"""
	A block holding exactly what body held. The brace offset is that
	of the wrapped statement if there is one, else whatever the caller says.
	"""
	if isinstance(body, syntax.BlockStatement):
		return body
	if body is None:
		statements = []
	elif isinstance(body, Statement):
		statements = [body]
	else:
		statements = list(body)
	left_brace = statements[0].idx0() if statements else idx
	return syntax.BlockStatement(statements, left_brace=left_brace)

def _required_block(body:BODY, idx:int=None) -> Optional[syntax.BlockStatement]:
	""" An absent required body stays absent, so the walk still faults on it. """
	if body is None: return None
	return as_block(body, idx)

def _is_one_block(body:Sequence[Statement]) -> bool:
	return len(body) == 1 and isinstance(body[0], syntax.BlockStatement)

def _as_block_list(body:Sequence[Statement], idx:Optional[int]) -> list[Statement]:
	if _is_one_block(body): return list(body)
	return [as_block(body, idx)]

class BlockNormalizer(DefaultVisitor):
	"""
	With normalize_all switched off, this is just the default visitor.
	"""

	def __init__(self, normalize_all:bool=True):
		super().__init__()
		self.normalize_all = normalize_all

	def visit_Program(self, it:syntax.Program, w:Walker, stack:STACK):
		if self.normalize_all:
			it.body = _as_block_list(it.body, it.idx0())
		return super().visit_Program(it, w, stack)

	def visit_FunctionLiteral(self, it:syntax.FunctionLiteral, w:Walker, stack:STACK):
		if self.normalize_all:
			it.body = _required_block(it.body, it.idx)
		return super().visit_FunctionLiteral(it, w, stack)

	def visit_IfStatement(self, it:syntax.IfStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.consequent = _required_block(it.consequent, it.idx)
			it.alternate = as_block(it.alternate, it.idx)
		return super().visit_IfStatement(it, w, stack)

	def visit_WhileStatement(self, it:syntax.WhileStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.body = _required_block(it.body, it.idx)
		return super().visit_WhileStatement(it, w, stack)

	def visit_DoWhileStatement(self, it:syntax.DoWhileStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.body = _required_block(it.body, it.idx)
		return super().visit_DoWhileStatement(it, w, stack)

	def visit_ForStatement(self, it:syntax.ForStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.body = _required_block(it.body, it.idx)
		return super().visit_ForStatement(it, w, stack)

	def visit_ForInStatement(self, it:syntax.ForInStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.body = _required_block(it.body, it.idx)
		return super().visit_ForInStatement(it, w, stack)

	def visit_LabelledStatement(self, it:syntax.LabelledStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.statement = _required_block(it.statement, it.colon)
		return super().visit_LabelledStatement(it, w, stack)

	def visit_TryStatement(self, it:syntax.TryStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.body = _required_block(it.body, it.idx)
			it.finalizer = as_block(it.finalizer, it.idx)
		return super().visit_TryStatement(it, w, stack)

	def visit_CatchStatement(self, it:syntax.CatchStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.body = _required_block(it.body, it.idx)
		return super().visit_CatchStatement(it, w, stack)

	def visit_WithStatement(self, it:syntax.WithStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.body = _required_block(it.body, it.idx)
		return super().visit_WithStatement(it, w, stack)

	def visit_CaseStatement(self, it:syntax.CaseStatement, w:Walker, stack:STACK):
		if self.normalize_all:
			it.consequent = _as_block_list([c for c in it.consequent if c is not None], it.idx)
		return super().visit_CaseStatement(it, w, stack)

def normalize(root, report=None):
	""" Convenience: run the normalizer over a whole tree and answer the root. """
	Walker(BlockNormalizer(), report).begin(root)
	return root
