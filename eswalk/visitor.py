"""
The default visitor: a perfectly ordinary top-down walk through the tree.

Dispatch is by class name, courtesy of boozetools: the walker calls
`visitor.visit(node, walker, stack)` and lands in `visit_<Kind>`.
Each operation walks the children in the order they appear in source,
skips the optional ones that are absent, and answers the current frame.

Specialized visitors subclass this, do their own thing first,
then call through to the inherited operation to keep the traversal order.
"""
from typing import TYPE_CHECKING
from boozetools.support.foundation import Visitor
from . import syntax
from .hooks import Hook
from .stacking import STACK, Metadata, current_metadata

if TYPE_CHECKING:
	from .walker import Walker

class DefaultVisitor(Visitor):
	_hooks: list[Hook]

	def __init__(self):
		self._hooks = []

	@property
	def hooks(self) -> tuple[Hook, ...]: return tuple(self._hooks)
	def add_hook(self, hook:Hook): self._hooks.append(hook)
	def remove_hook(self, hook:Hook): self._hooks.remove(hook)
	def reset_hooks(self): self._hooks.clear()

	@staticmethod
	def tour(w:"Walker", items, stack:STACK):
		for i in items:
			w.walk(i, stack)

	# Leaves

	@staticmethod
	def _leaf(it, w:"Walker", stack:STACK) -> Metadata:
		return current_metadata(stack)

	visit_BadExpression = _leaf
	visit_BadStatement = _leaf
	visit_BooleanLiteral = _leaf
	visit_DebuggerStatement = _leaf
	visit_EmptyExpression = _leaf
	visit_EmptyStatement = _leaf
	visit_Identifier = _leaf
	visit_NullLiteral = _leaf
	visit_NumberLiteral = _leaf
	visit_RegExpLiteral = _leaf
	visit_StringLiteral = _leaf
	visit_ThisExpression = _leaf

	# Expressions

	def visit_ArrayLiteral(self, it:syntax.ArrayLiteral, w:"Walker", stack:STACK):
		# Elisions like [1,,2] leave holes.
		self.tour(w, (e for e in it.value if e is not None), stack)
		return current_metadata(stack)

	def visit_AssignExpression(self, it:syntax.AssignExpression, w:"Walker", stack:STACK):
		w.walk(it.left, stack)
		w.walk(it.right, stack)
		return current_metadata(stack)

	def visit_BinaryExpression(self, it:syntax.BinaryExpression, w:"Walker", stack:STACK):
		w.walk(it.left, stack)
		w.walk(it.right, stack)
		return current_metadata(stack)

	def visit_BracketExpression(self, it:syntax.BracketExpression, w:"Walker", stack:STACK):
		w.walk(it.left, stack)
		w.walk(it.member, stack)
		return current_metadata(stack)

	def visit_CallExpression(self, it:syntax.CallExpression, w:"Walker", stack:STACK):
		w.walk(it.callee, stack)
		self.tour(w, it.argument_list, stack)
		return current_metadata(stack)

	def visit_ConditionalExpression(self, it:syntax.ConditionalExpression, w:"Walker", stack:STACK):
		w.walk(it.test, stack)
		w.walk(it.consequent, stack)
		w.walk(it.alternate, stack)
		return current_metadata(stack)

	def visit_DotExpression(self, it:syntax.DotExpression, w:"Walker", stack:STACK):
		w.walk(it.left, stack)
		w.walk(it.identifier, stack)
		return current_metadata(stack)

	def visit_FunctionLiteral(self, it:syntax.FunctionLiteral, w:"Walker", stack:STACK):
		if it.name is not None:
			w.walk(it.name, stack)
		self.tour(w, it.parameter_list.names, stack)
		w.walk(it.body, stack)
		return current_metadata(stack)

	def visit_NewExpression(self, it:syntax.NewExpression, w:"Walker", stack:STACK):
		w.walk(it.callee, stack)
		self.tour(w, it.argument_list, stack)
		return current_metadata(stack)

	def visit_ObjectLiteral(self, it:syntax.ObjectLiteral, w:"Walker", stack:STACK):
		# Keys are plain strings; only the values are nodes.
		self.tour(w, (p.value for p in it.value), stack)
		return current_metadata(stack)

	def visit_SequenceExpression(self, it:syntax.SequenceExpression, w:"Walker", stack:STACK):
		self.tour(w, it.sequence, stack)
		return current_metadata(stack)

	def visit_UnaryExpression(self, it:syntax.UnaryExpression, w:"Walker", stack:STACK):
		w.walk(it.operand, stack)
		return current_metadata(stack)

	def visit_VariableExpression(self, it:syntax.VariableExpression, w:"Walker", stack:STACK):
		if it.initializer is not None:
			w.walk(it.initializer, stack)
		return current_metadata(stack)

	# Statements

	def visit_BlockStatement(self, it:syntax.BlockStatement, w:"Walker", stack:STACK):
		self.tour(w, it.statements, stack)
		return current_metadata(stack)

	def visit_BranchStatement(self, it:syntax.BranchStatement, w:"Walker", stack:STACK):
		if it.label is not None:
			w.walk(it.label, stack)
		return current_metadata(stack)

	def visit_CaseStatement(self, it:syntax.CaseStatement, w:"Walker", stack:STACK):
		if it.test is not None:
			w.walk(it.test, stack)
		# Parsers may leave holes in a clause list; they are skipped, not faulted.
		self.tour(w, (c for c in it.consequent if c is not None), stack)
		return current_metadata(stack)

	def visit_CatchStatement(self, it:syntax.CatchStatement, w:"Walker", stack:STACK):
		w.walk(it.parameter, stack)
		w.walk(it.body, stack)
		return current_metadata(stack)

	def visit_DoWhileStatement(self, it:syntax.DoWhileStatement, w:"Walker", stack:STACK):
		w.walk(it.body, stack)
		w.walk(it.test, stack)
		return current_metadata(stack)

	def visit_ExpressionStatement(self, it:syntax.ExpressionStatement, w:"Walker", stack:STACK):
		w.walk(it.expression, stack)
		return current_metadata(stack)

	def visit_ForInStatement(self, it:syntax.ForInStatement, w:"Walker", stack:STACK):
		w.walk(it.into, stack)
		w.walk(it.source, stack)
		w.walk(it.body, stack)
		return current_metadata(stack)

	def visit_ForStatement(self, it:syntax.ForStatement, w:"Walker", stack:STACK):
		if it.initializer is not None:
			w.walk(it.initializer, stack)
		if it.test is not None:
			w.walk(it.test, stack)
		if it.update is not None:
			w.walk(it.update, stack)
		w.walk(it.body, stack)
		return current_metadata(stack)

	def visit_FunctionStatement(self, it:syntax.FunctionStatement, w:"Walker", stack:STACK):
		w.walk(it.function, stack)
		return current_metadata(stack)

	def visit_IfStatement(self, it:syntax.IfStatement, w:"Walker", stack:STACK):
		w.walk(it.test, stack)
		w.walk(it.consequent, stack)
		if it.alternate is not None:
			w.walk(it.alternate, stack)
		return current_metadata(stack)

	def visit_LabelledStatement(self, it:syntax.LabelledStatement, w:"Walker", stack:STACK):
		w.walk(it.label, stack)
		w.walk(it.statement, stack)
		return current_metadata(stack)

	def visit_ReturnStatement(self, it:syntax.ReturnStatement, w:"Walker", stack:STACK):
		if it.argument is not None:
			w.walk(it.argument, stack)
		return current_metadata(stack)

	def visit_SwitchStatement(self, it:syntax.SwitchStatement, w:"Walker", stack:STACK):
		w.walk(it.discriminant, stack)
		self.tour(w, (c for c in it.body if c is not None), stack)
		return current_metadata(stack)

	def visit_ThrowStatement(self, it:syntax.ThrowStatement, w:"Walker", stack:STACK):
		w.walk(it.argument, stack)
		return current_metadata(stack)

	def visit_TryStatement(self, it:syntax.TryStatement, w:"Walker", stack:STACK):
		w.walk(it.body, stack)
		if it.catch is not None:
			w.walk(it.catch, stack)
		if it.finalizer is not None:
			w.walk(it.finalizer, stack)
		return current_metadata(stack)

	def visit_VariableStatement(self, it:syntax.VariableStatement, w:"Walker", stack:STACK):
		self.tour(w, it.variables, stack)
		return current_metadata(stack)

	def visit_WhileStatement(self, it:syntax.WhileStatement, w:"Walker", stack:STACK):
		w.walk(it.test, stack)
		w.walk(it.body, stack)
		return current_metadata(stack)

	def visit_WithStatement(self, it:syntax.WithStatement, w:"Walker", stack:STACK):
		w.walk(it.object, stack)
		w.walk(it.body, stack)
		return current_metadata(stack)

	def visit_Program(self, it:syntax.Program, w:"Walker", stack:STACK):
		self.tour(w, it.body, stack)
		return current_metadata(stack)
