"""
The set of syntax-tree nodes the walker understands, in simple form.
An external parser calls these constructors bottom-up; the walker never builds
nodes itself, except for the blocks the normalizer synthesizes.

Fields are exactly what the parser supplies. Where a node begins with a
keyword of its own, `idx` is the offset of that keyword; otherwise the start
offset is borrowed from the first child.
"""
from typing import Optional, Sequence
from .ontology import Node, Expression, Statement, Declaration
from .location import SourceFile

#######################################################################
# Helper records: carried by nodes, but never dispatched on their own.

class ParameterList:
	def __init__(self, names:Sequence["Identifier"]=(), opening:int=0, closing:int=0):
		self.names = list(names)
		self.opening, self.closing = opening, closing

class Property:
	""" One entry of an object literal. Kind is "value", "get" or "set". """
	def __init__(self, key:str, value:Expression, kind:str="value"):
		self.key, self.value, self.kind = key, value, kind

class VariableDeclaration(Declaration):
	def __init__(self, variables:Sequence["VariableExpression"], idx:int=0):
		self.variables = list(variables)
		self.idx = idx

class FunctionDeclaration(Declaration):
	def __init__(self, function:"FunctionLiteral"):
		self.function = function

#######################################################################
# Expressions

class ArrayLiteral(Expression):
	def __init__(self, value:Sequence[Expression]=(), left_bracket:int=0, right_bracket:int=0):
		self.value = list(value)
		self.left_bracket, self.right_bracket = left_bracket, right_bracket
	def idx0(self): return self.left_bracket

class AssignExpression(Expression):
	def __init__(self, operator:str, left:Expression, right:Expression):
		self.operator, self.left, self.right = operator, left, right
	def idx0(self): return self.left.idx0()

class BadExpression(Expression):
	""" Whatever the parser could not make sense of. """
	def __init__(self, start:int=0, end:int=0):
		self.start, self.end = start, end
	def idx0(self): return self.start

class BinaryExpression(Expression):
	def __init__(self, operator:str, left:Expression, right:Expression, comparison:bool=False):
		self.operator, self.left, self.right = operator, left, right
		self.comparison = comparison
	def idx0(self): return self.left.idx0()

class BooleanLiteral(Expression):
	def __init__(self, value:bool, literal:str=None, idx:int=0):
		self.value = value
		self.literal = literal or ("true" if value else "false")
		self.idx = idx
	def idx0(self): return self.idx

class BracketExpression(Expression):
	def __init__(self, left:Expression, member:Expression, left_bracket:int=0, right_bracket:int=0):
		self.left, self.member = left, member
		self.left_bracket, self.right_bracket = left_bracket, right_bracket
	def idx0(self): return self.left.idx0()

class CallExpression(Expression):
	def __init__(self, callee:Expression, argument_list:Sequence[Expression]=(), left_paren:int=0, right_paren:int=0):
		self.callee = callee
		self.argument_list = list(argument_list)
		self.left_paren, self.right_paren = left_paren, right_paren
	def idx0(self): return self.callee.idx0()

class ConditionalExpression(Expression):
	def __init__(self, test:Expression, consequent:Expression, alternate:Expression):
		self.test, self.consequent, self.alternate = test, consequent, alternate
	def idx0(self): return self.test.idx0()

class DotExpression(Expression):
	def __init__(self, left:Expression, identifier:"Identifier"):
		self.left, self.identifier = left, identifier
	def idx0(self): return self.left.idx0()

class EmptyExpression(Expression):
	def __init__(self, begin:int=0, end:int=0):
		self.begin, self.end = begin, end
	def idx0(self): return self.begin

class FunctionLiteral(Expression):
	"""
	Introduces a scope. The parser hoists every `var` of the function
	(but not of nested functions) into the declaration list.
	"""
	name: Optional["Identifier"]
	body: Statement
	def __init__(self, body:Statement, name:"Identifier"=None, parameter_list:ParameterList=None,
	             declaration_list:Sequence[Declaration]=(), source:str="", idx:int=0):
		self.name = name
		self.parameter_list = parameter_list or ParameterList()
		self.body = body
		self.declaration_list = list(declaration_list)
		self.source = source
		self.idx = idx
	def idx0(self): return self.idx

class Identifier(Expression):
	def __init__(self, name:str, idx:int=0):
		self.name, self.idx = name, idx
	def __repr__(self): return "<Identifier %s>" % self.name
	def idx0(self): return self.idx

class NewExpression(Expression):
	def __init__(self, callee:Expression, argument_list:Sequence[Expression]=(), left_paren:int=0, right_paren:int=0, idx:int=0):
		self.callee = callee
		self.argument_list = list(argument_list)
		self.left_paren, self.right_paren = left_paren, right_paren
		self.idx = idx
	def idx0(self): return self.idx

class NullLiteral(Expression):
	def __init__(self, literal:str="null", idx:int=0):
		self.literal, self.idx = literal, idx
	def idx0(self): return self.idx

class NumberLiteral(Expression):
	def __init__(self, value, literal:str=None, idx:int=0):
		self.value = value
		self.literal = literal or str(value)
		self.idx = idx
	def idx0(self): return self.idx

class ObjectLiteral(Expression):
	def __init__(self, value:Sequence[Property]=(), left_brace:int=0, right_brace:int=0):
		self.value = list(value)
		self.left_brace, self.right_brace = left_brace, right_brace
	def idx0(self): return self.left_brace

class RegExpLiteral(Expression):
	def __init__(self, pattern:str, flags:str="", literal:str=None, idx:int=0):
		self.pattern, self.flags = pattern, flags
		self.literal = literal or "/%s/%s" % (pattern, flags)
		self.idx = idx
	def idx0(self): return self.idx

class SequenceExpression(Expression):
	def __init__(self, sequence:Sequence[Expression]):
		self.sequence = list(sequence)
	def idx0(self): return self.sequence[0].idx0()

class StringLiteral(Expression):
	def __init__(self, value:str, literal:str=None, idx:int=0):
		self.value = value
		self.literal = literal or repr(value)
		self.idx = idx
	def idx0(self): return self.idx

class ThisExpression(Expression):
	def __init__(self, idx:int=0):
		self.idx = idx
	def idx0(self): return self.idx

class UnaryExpression(Expression):
	def __init__(self, operator:str, operand:Expression, postfix:bool=False, idx:int=0):
		self.operator, self.operand = operator, operand
		self.postfix = postfix
		self.idx = idx
	def idx0(self):
		if self.postfix: return self.operand.idx0()
		return self.idx

class VariableExpression(Expression):
	""" One declarator of a `var` statement: the name, and maybe an initial value. """
	def __init__(self, name:str, initializer:Expression=None, idx:int=0):
		self.name, self.initializer = name, initializer
		self.idx = idx
	def __repr__(self): return "<VariableExpression %s>" % self.name
	def idx0(self): return self.idx

#######################################################################
# Statements

class BadStatement(Statement):
	def __init__(self, start:int=0, end:int=0):
		self.start, self.end = start, end
	def idx0(self): return self.start

class BlockStatement(Statement):
	statements: list[Statement]
	def __init__(self, statements:Sequence[Statement]=(), left_brace:int=None, right_brace:int=None):
		self.statements = list(statements)
		self.left_brace, self.right_brace = left_brace, right_brace
	def idx0(self):
		if self.left_brace is not None: return self.left_brace
		if self.statements: return self.statements[0].idx0()
		return 0

class BranchStatement(Statement):
	""" Either `break` or `continue`, with an optional label. """
	def __init__(self, token:str, label:Identifier=None, idx:int=0):
		assert token in ("break", "continue"), token
		self.token, self.label = token, label
		self.idx = idx
	def idx0(self): return self.idx

class CaseStatement(Statement):
	""" A `default:` clause has no test. """
	def __init__(self, test:Optional[Expression], consequent:Sequence[Statement]=(), idx:int=0):
		self.test = test
		self.consequent = list(consequent)
		self.idx = idx
	def idx0(self): return self.idx

class CatchStatement(Statement):
	def __init__(self, parameter:Identifier, body:Statement, idx:int=0):
		self.parameter, self.body = parameter, body
		self.idx = idx
	def idx0(self): return self.idx

class DebuggerStatement(Statement):
	def __init__(self, idx:int=0):
		self.idx = idx
	def idx0(self): return self.idx

class DoWhileStatement(Statement):
	def __init__(self, body:Statement, test:Expression, idx:int=0):
		self.body, self.test = body, test
		self.idx = idx
	def idx0(self): return self.idx

class EmptyStatement(Statement):
	def __init__(self, semicolon:int=0):
		self.semicolon = semicolon
	def idx0(self): return self.semicolon

class ExpressionStatement(Statement):
	def __init__(self, expression:Expression):
		self.expression = expression
	def idx0(self): return self.expression.idx0()

class ForInStatement(Statement):
	def __init__(self, into:Expression, source:Expression, body:Statement, idx:int=0):
		self.into, self.source, self.body = into, source, body
		self.idx = idx
	def idx0(self): return self.idx

class ForStatement(Statement):
	""" Any of initializer, test and update may be absent. """
	def __init__(self, body:Statement, initializer:Expression=None, test:Expression=None, update:Expression=None, idx:int=0):
		self.initializer, self.test, self.update = initializer, test, update
		self.body = body
		self.idx = idx
	def idx0(self): return self.idx

class FunctionStatement(Statement):
	def __init__(self, function:FunctionLiteral):
		self.function = function
	def idx0(self): return self.function.idx0()

class IfStatement(Statement):
	def __init__(self, test:Expression, consequent:Statement, alternate:Statement=None, idx:int=0):
		self.test, self.consequent, self.alternate = test, consequent, alternate
		self.idx = idx
	def idx0(self): return self.idx

class LabelledStatement(Statement):
	def __init__(self, label:Identifier, statement:Statement, colon:int=0):
		self.label, self.statement = label, statement
		self.colon = colon
	def idx0(self): return self.label.idx0()

class ReturnStatement(Statement):
	def __init__(self, argument:Expression=None, idx:int=0):
		self.argument = argument
		self.idx = idx
	def idx0(self): return self.idx

class SwitchStatement(Statement):
	""" `default` is the index of the default clause within body, or -1. """
	def __init__(self, discriminant:Expression, body:Sequence[CaseStatement]=(), default:int=-1, idx:int=0):
		self.discriminant = discriminant
		self.body = list(body)
		self.default = default
		self.idx = idx
	def idx0(self): return self.idx

class ThrowStatement(Statement):
	def __init__(self, argument:Expression, idx:int=0):
		self.argument = argument
		self.idx = idx
	def idx0(self): return self.idx

class TryStatement(Statement):
	def __init__(self, body:Statement, catch:CatchStatement=None, finalizer:Statement=None, idx:int=0):
		self.body, self.catch, self.finalizer = body, catch, finalizer
		self.idx = idx
	def idx0(self): return self.idx

class VariableStatement(Statement):
	def __init__(self, variables:Sequence[VariableExpression], idx:int=0):
		self.variables = list(variables)
		self.idx = idx
	def idx0(self): return self.idx

class WhileStatement(Statement):
	def __init__(self, test:Expression, body:Statement, idx:int=0):
		self.test, self.body = test, body
		self.idx = idx
	def idx0(self): return self.idx

class WithStatement(Statement):
	def __init__(self, object:Expression, body:Statement, idx:int=0):
		self.object, self.body = object, body
		self.idx = idx
	def idx0(self): return self.idx

#######################################################################

class Program(Node):
	""" The root. Introduces the outermost scope and knows its source file. """
	body: list[Statement]
	def __init__(self, body:Sequence[Statement]=(), declaration_list:Sequence[Declaration]=(), file:SourceFile=None):
		self.body = list(body)
		self.declaration_list = list(declaration_list)
		self.file = file
	def idx0(self):
		return self.body[0].idx0() if self.body else 0

SCOPE_KINDS = (Program, FunctionLiteral)

NODE_KINDS = frozenset([
	ArrayLiteral, AssignExpression, BadExpression, BinaryExpression, BooleanLiteral,
	BracketExpression, CallExpression, ConditionalExpression, DotExpression,
	EmptyExpression, FunctionLiteral, Identifier, NewExpression, NullLiteral,
	NumberLiteral, ObjectLiteral, RegExpLiteral, SequenceExpression, StringLiteral,
	ThisExpression, UnaryExpression, VariableExpression,

	BadStatement, BlockStatement, BranchStatement, CaseStatement, CatchStatement,
	DebuggerStatement, DoWhileStatement, EmptyStatement, ExpressionStatement,
	ForInStatement, ForStatement, FunctionStatement, IfStatement, LabelledStatement,
	ReturnStatement, SwitchStatement, ThrowStatement, TryStatement, VariableStatement,
	WhileStatement, WithStatement,

	Program,
])

HELPER_KINDS = frozenset([ParameterList, Property, VariableDeclaration, FunctionDeclaration])
