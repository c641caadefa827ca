import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from eswalk import syntax as s
from eswalk.diagnostics import Report, TooManyIssues
from eswalk.hooks import Breadcrumbs
from eswalk.loader import TreeFormatError, build_tree, load_tree
from eswalk.location import SourceFile
from eswalk.stacking import current_metadata
from eswalk.visitor import DefaultVisitor
from eswalk.walker import Walker, MalformedTree

class Silence(Report):
	def __init__(self, **kwargs):
		super().__init__(verbose=False, **kwargs)
		self.complain_to_console = mock.Mock()

TEXT = "var x = 1;\nif (x) y();\n"

def broken_program():
	""" An if-statement that lost its test. """
	call = s.ExpressionStatement(s.CallExpression(s.Identifier("y", 18)))
	return s.Program([s.IfStatement(None, call, idx=11)], file=SourceFile("t.js", TEXT))

class FaultBoundaryTests(unittest.TestCase):
	""" Tests that assert about failure modes. """

	def test_fault_is_reported_with_position(self):
		root = broken_program()
		report = Silence()
		walker = Walker(DefaultVisitor(), report, catch_faults=True)
		self.assertIsNone(walker.begin(root))
		self.assertTrue(report.sick())
		self.assertEqual(0, report.complain_to_console.call_count)
		[issue] = report.issues
		self.assertEqual(root.file.position(11), issue.position)
		self.assertEqual(root.file.position(0).line + 1, issue.position.line)
		self.assertIsInstance(issue.exception, MalformedTree)
		self.assertIn("IfStatement", issue.description)
		text = issue.as_text()
		self.assertIn("Position is t.js:", text)
		self.assertIn("MalformedTree", text)

	def test_walker_survives_its_fault(self):
		report = Silence()
		crumbs = Breadcrumbs()
		visitor = DefaultVisitor()
		visitor.add_hook(crumbs)
		walker = Walker(visitor, report, catch_faults=True)
		walker.begin(broken_program())
		report.reset()
		good = s.Program([s.EmptyStatement()])
		self.assertIs(good, walker.begin(good).node)
		self.assertTrue(report.ok())
		self.assertEqual(["Program", "EmptyStatement"], crumbs.kinds()[-2:])

	def test_no_boundary_means_the_fault_propagates(self):
		with self.assertRaises(MalformedTree):
			Walker(DefaultVisitor(), Silence()).begin(broken_program())

	def test_visitor_exception_names_the_node(self):
		class Grumpy(DefaultVisitor):
			def visit_CallExpression(self, it, w, stack):
				raise RuntimeError("no calls today")
		report = Silence()
		root = broken_program()
		root.body[0].test = s.Identifier("x", 15)
		Walker(Grumpy(), report, catch_faults=True).begin(root)
		[issue] = report.issues
		self.assertIn("CallExpression", issue.description)
		self.assertIsInstance(issue.exception, RuntimeError)
		self.assertEqual(root.file.position(18), issue.position)

	def test_fault_without_source_text(self):
		report = Silence()
		root = s.Program([s.WhileStatement(None, s.EmptyStatement())])
		Walker(DefaultVisitor(), report, catch_faults=True).begin(root)
		[issue] = report.issues
		self.assertIsNone(issue.position)
		self.assertIn("Unknown position!", issue.as_text())

	def test_too_many_issues(self):
		report = Silence(max_issues=2)
		report.no_such_file("a")
		with self.assertRaises(TooManyIssues):
			report.no_such_file("b")

	def test_assert_no_issues(self):
		report = Silence()
		report.assert_no_issues("fine")
		report.no_such_file("a")
		with self.assertRaises(AssertionError):
			report.assert_no_issues("not fine")
		self.assertEqual(1, report.complain_to_console.call_count)

class LoaderTests(unittest.TestCase):

	def test_builds_nodes_and_helpers(self):
		root = build_tree({
			"kind": "Program",
			"source": "o = {a: 1};",
			"filename": "o.js",
			"body": [{"kind": "ExpressionStatement", "expression": {
				"kind": "AssignExpression", "operator": "=",
				"left": {"kind": "Identifier", "name": "o", "idx": 0},
				"right": {"kind": "ObjectLiteral", "value": [
					{"kind": "Property", "key": "a", "value": {"kind": "NumberLiteral", "value": 1, "idx": 8}},
					{"kind": "Property", "key": "b", "property_kind": "get", "value": {"kind": "NullLiteral"}},
				], "left_brace": 4},
			}}],
		})
		self.assertIsInstance(root, s.Program)
		self.assertEqual("o.js", root.file.name)
		prop = root.body[0].expression.right.value[0]
		self.assertIsInstance(prop, s.Property)
		self.assertEqual(1, prop.value.value)
		self.assertEqual("value", prop.kind)
		self.assertEqual("get", root.body[0].expression.right.value[1].kind)

	def test_unknown_kind(self):
		with self.assertRaises(TreeFormatError):
			build_tree({"kind": "GotoStatement"})

	def test_missing_kind(self):
		with self.assertRaises(TreeFormatError):
			build_tree({"name": "x"})

	def test_bad_fields(self):
		with self.assertRaises(TreeFormatError):
			build_tree({"kind": "Identifier", "nom": "x"})
		with self.assertRaises(TreeFormatError):
			build_tree({"kind": "BranchStatement", "token": "goto"})

	def test_not_json(self):
		with tempfile.TemporaryDirectory() as tmp:
			path = Path(tmp) / "bad.json"
			path.write_text("{ nope", encoding="utf-8")
			with self.assertRaises(TreeFormatError):
				load_tree(path)

	def test_not_utf8(self):
		with tempfile.TemporaryDirectory() as tmp:
			path = Path(tmp) / "latin.json"
			path.write_bytes(b'{"kind": "Program", "source": "\xff\xfe"}')
			with self.assertRaises(TreeFormatError):
				load_tree(path)

	def test_filename_defaults_to_the_path(self):
		with tempfile.TemporaryDirectory() as tmp:
			path = Path(tmp) / "p.json"
			path.write_text(json.dumps({"kind": "Program", "source": ""}), encoding="utf-8")
			root = load_tree(path)
		self.assertEqual(str(path), root.file.name)

if __name__ == '__main__':
	unittest.main()
