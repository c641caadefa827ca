import unittest

from eswalk import syntax as s
from eswalk.hooks import Hook
from eswalk.space import Variables, collect_scope, find_variable
from eswalk.stacking import (
	Metadata, current_metadata, parent_metadata,
	find_parent_statement, find_parent_function,
	find_ith_parent_statement, find_ith_parent_statement_metadata,
)
from eswalk.visitor import DefaultVisitor
from eswalk.walker import Walker

def shadowing():
	"""
		var x = 1;            // x declared at 4
		function f() {
			var x = 2;        // x declared at 30
			g(x);
		}
		h(x);
	"""
	outer_x = s.VariableExpression("x", s.NumberLiteral(1, idx=8), idx=4)
	inner_x = s.VariableExpression("x", s.NumberLiteral(2, idx=34), idx=30)
	inner_use = s.Identifier("x", 43)
	outer_use = s.Identifier("x", 52)
	call_g = s.ExpressionStatement(s.CallExpression(s.Identifier("g", 41), [inner_use]))
	fn = s.FunctionLiteral(
		s.BlockStatement([s.VariableStatement([inner_x], idx=26), call_g], left_brace=24),
		name=s.Identifier("f", 20),
		declaration_list=[s.VariableDeclaration([inner_x], idx=26)],
		idx=11,
	)
	root = s.Program(
		[
			s.VariableStatement([outer_x], idx=0),
			s.FunctionStatement(fn),
			s.ExpressionStatement(s.CallExpression(s.Identifier("h", 50), [outer_use])),
		],
		declaration_list=[s.VariableDeclaration([outer_x])],
	)
	return root, fn, call_g, inner_use, outer_use

def stacks_of(root) -> dict:
	""" The stack each node was visited with, by node identity. """
	seen = {}
	visitor = DefaultVisitor()
	visitor.add_hook(Hook(on_enter=lambda node, stack: seen.__setitem__(id(node), stack)))
	Walker(visitor).begin(root)
	return seen

class ScopeLookupTests(unittest.TestCase):

	def test_innermost_declaration_wins(self):
		root, fn, call_g, inner_use, outer_use = shadowing()
		stacks = stacks_of(root)
		self.assertEqual(30, find_variable(stacks[id(inner_use)], "x"))
		self.assertEqual(4, find_variable(stacks[id(outer_use)], "x"))

	def test_not_found(self):
		root, fn, call_g, inner_use, outer_use = shadowing()
		stacks = stacks_of(root)
		self.assertIsNone(find_variable(stacks[id(inner_use)], "nope"))
		self.assertIsNone(find_variable((Metadata(None),), "x"))

	def test_only_programs_and_functions_have_scopes(self):
		root, fn, call_g, inner_use, outer_use = shadowing()
		stack = stacks_of(root)[id(inner_use)]
		self.assertIsNone(stack[0].scope)
		with_scope = [md.node for md in stack if md.scope is not None]
		self.assertEqual([root, fn], with_scope)

	def test_redeclaration_at_one_level(self):
		first = s.VariableExpression("y", idx=1)
		second = s.VariableExpression("y", idx=2)
		md = Metadata(s.Program())
		collect_scope(md, [s.VariableDeclaration([first]), s.VariableDeclaration([second])])
		self.assertEqual(2, md.scope.locate("y"))
		self.assertEqual(1, len(md.scope))

	def test_function_declarations_are_not_variables(self):
		fn = s.FunctionLiteral(s.BlockStatement(), name=s.Identifier("f"))
		md = Metadata(s.Program())
		collect_scope(md, [s.FunctionDeclaration(fn)])
		self.assertNotIn("f", md.scope)

	def test_variables(self):
		v = Variables()
		v.declare("a", 3)
		v.declare("b", 5)
		self.assertIn("a", v)
		self.assertEqual(["a", "b"], list(v))
		self.assertEqual({"a": 3, "b": 5}, dict(v.items()))
		self.assertIsNone(v.locate("c"))

class StackHelperTests(unittest.TestCase):

	def test_current_and_parent_metadata(self):
		top, below = Metadata(None), Metadata(s.EmptyStatement())
		self.assertIsNone(current_metadata(()))
		self.assertIsNone(parent_metadata((top,)))
		self.assertIs(below, current_metadata((top, below)))
		self.assertIs(top, parent_metadata((top, below)))

	def test_nearest_statement_and_function(self):
		root, fn, call_g, inner_use, outer_use = shadowing()
		stacks = stacks_of(root)
		self.assertIs(call_g, find_parent_statement(stacks[id(inner_use)]))
		self.assertIs(fn, find_parent_function(stacks[id(inner_use)]))
		self.assertIsNone(find_parent_function(stacks[id(outer_use)]))

	def test_ith_parent_statement(self):
		root, fn, call_g, inner_use, outer_use = shadowing()
		stack = stacks_of(root)[id(inner_use)]
		block = fn.body
		function_statement = root.body[1]
		self.assertIs(call_g, find_ith_parent_statement(stack, 0))
		self.assertIs(block, find_ith_parent_statement(stack, 1))
		self.assertIs(function_statement, find_ith_parent_statement(stack, 2))
		self.assertIs(root, find_ith_parent_statement(stack, 3))
		self.assertIsNone(find_ith_parent_statement(stack, 4))

	def test_ith_parent_statement_metadata(self):
		root, fn, call_g, inner_use, outer_use = shadowing()
		stack = stacks_of(root)[id(inner_use)]
		prefix = find_ith_parent_statement_metadata(stack, 1)
		self.assertIs(fn.body, prefix[-1].node)
		self.assertEqual(stack[:len(prefix)], prefix)
		self.assertIsNone(find_ith_parent_statement_metadata(stack, 9))

	def test_program_is_not_a_plain_statement(self):
		root = s.Program([s.ExpressionStatement(s.Identifier("x"))])
		stack = stacks_of(root)[id(root)]
		self.assertIsNone(find_parent_statement(stack))

if __name__ == '__main__':
	unittest.main()
