import io
import unittest
from unittest import mock

from scopewalk.syntax import (
	Literal, Lookup, BinExp, UnaryExp, ShortCutExp, Call,
	ExprStmt, Print, VarDecl, FunDecl, Return, If, Block,
)
from scopewalk.resolution import StaticCheck
from scopewalk.executive import run_program, check_program, OK, COMPILE_ERROR, RUNTIME_ERROR
from scopewalk.diagnostics import Report, TooManyIssues
from scopewalk import demo

class Silence(Report):
	def __init__(self):
		super().__init__(verbose=False, max_issues=30)
		self.complain_to_console = mock.Mock()
	pass

def _problems(statements) -> list[str]:
	report = Silence()
	StaticCheck(report).check_program(statements)
	return [pic.as_text() for pic in report.issues]

class StaticCheckTests(unittest.TestCase):
	""" Things that should be refused before the program runs. """

	def test_demo_is_clean(self):
		self.assertEqual([], _problems(demo.program()))

	def test_top_level_return(self):
		problems = _problems([Return(Literal(1), 4)])
		self.assertEqual(["Illegal return statement in the top-level.\n[line 4]"], problems)

	def test_top_level_return_inside_block(self):
		problems = _problems([Block([If(Literal(True), Return())])])
		self.assertEqual(1, len(problems))

	def test_return_inside_function_is_fine(self):
		self.assertEqual([], _problems([FunDecl("f", [], [Block([Return()])])]))

	def test_duplicate_local(self):
		problems = _problems([FunDecl("f", [], [
			VarDecl("a", Literal(1), 2),
			VarDecl("a", Literal(2), 3),
		], 1)])
		self.assertEqual(["Already a variable with this name in this scope.\n[line 3] 'a'"], problems)

	def test_duplicate_parameter(self):
		problems = _problems([FunDecl("f", ["x", "x"], [])])
		self.assertEqual(1, len(problems))
		self.assertTrue(problems[0].startswith("Already a variable"))

	def test_globals_may_be_redeclared(self):
		self.assertEqual([], _problems([VarDecl("a", Literal(1)), VarDecl("a", Literal(2))]))

	def test_shadowing_in_nested_block_is_fine(self):
		self.assertEqual([], _problems([Block([
			VarDecl("a", Literal(1)),
			Block([VarDecl("a", Literal(2))]),
		])]))

	def test_own_initializer(self):
		problems = _problems([
			VarDecl("a", Literal(1)),
			Block([VarDecl("a", Lookup("a", 7), 7)]),
		])
		self.assertEqual(["Can't read local variable in its own initializer.\n[line 7] 'a'"], problems)

	def test_global_initializer_may_mention_itself(self):
		# That is a run-time matter at the top level.
		self.assertEqual([], _problems([VarDecl("a", Lookup("a"))]))

	def test_function_may_mention_itself(self):
		self.assertEqual([], _problems([Block([demo.fib_declaration()])]))

	def test_unknown_operators(self):
		problems = _problems([
			ExprStmt(BinExp(Literal(1), "%", Literal(2))),
			ExprStmt(UnaryExp("~", Literal(2))),
			ExprStmt(ShortCutExp(Literal(1), "xor", Literal(2))),
		])
		self.assertEqual(3, len(problems))

	def test_too_many_arguments(self):
		problems = _problems([ExprStmt(Call(Lookup("f"), [Literal(i) for i in range(256)]))])
		self.assertEqual(["Can't have more than 255 arguments.\n[line 0]"], problems)

	def test_too_many_parameters(self):
		problems = _problems([FunDecl("f", ["p%d" % i for i in range(256)], [])])
		self.assertEqual(1, len(problems))

	def test_collects_every_problem(self):
		problems = _problems([Return(), Return(), FunDecl("f", ["x", "x"], [])])
		self.assertEqual(3, len(problems))

class ExecutiveRefusalTests(unittest.TestCase):

	def test_sick_program_never_runs(self):
		report = Silence()
		out = io.StringIO()
		status = run_program([Print(Literal("should not appear")), Return()], report, out=out)
		self.assertEqual(COMPILE_ERROR, status)
		self.assertEqual("", out.getvalue())
		self.assertEqual(1, report.complain_to_console.call_count)

	def test_earlier_issues_do_not_refuse_a_clean_program(self):
		report = Silence()
		self.assertEqual(RUNTIME_ERROR, run_program([Print(Lookup("ghost"))], report, out=io.StringIO()))
		out = io.StringIO()
		self.assertEqual(OK, run_program(demo.program(), report, out=out))
		self.assertEqual("55\n1\n2\n3\n", out.getvalue())
		self.assertEqual(1, len(report.issues))
		self.assertTrue(check_program(demo.program(), report))

	def test_too_many_issues_gives_up_quietly(self):
		report = Report(verbose=False, max_issues=3)
		self.assertFalse(check_program([Return()] * 10, report))
		self.assertEqual(3, len(report.issues))

	def test_issue_cap(self):
		report = Report(verbose=False, max_issues=2)
		report.top_level_return(Return())
		with self.assertRaises(TooManyIssues):
			report.top_level_return(Return())

if __name__ == '__main__':
	unittest.main()
