"""
A static pass over the program before anything runs.

It walks scopes the same way the run-time will, but only keeps track
of which local names exist and whether their initializers have finished.
Global names are left alone: the top level may redefine them at will,
and whether they exist is only known at run-time.

Everything it finds goes on the Report; it does not stop at the first problem.
"""

from typing import Optional, Sequence
from boozetools.support.foundation import Visitor
from . import syntax
from .ontology import Phrase
from .diagnostics import Report
from .primitive import PRIMITIVE_BINARY, PRIMITIVE_UNARY, SHORTCUT

MAX_PARAMETERS = 255
MAX_ARGUMENTS = 255

class StaticCheck(Visitor):
	_scopes: list[dict[str, bool]]  # name -> initializer finished? Innermost last; empty at top level.
	_function_depth: int

	def __init__(self, report: Report):
		self._report = report

	def check_program(self, statements: Sequence[syntax.Statement]):
		self._scopes = []
		self._function_depth = 0
		self._report.info("Static check:", len(statements), "top-level statement(s)")
		self.tour(statements)

	def tour(self, items) -> None:
		for i in items: self.visit(i)

	def _declare(self, name: str, site: Phrase):
		if not self._scopes: return
		scope = self._scopes[-1]
		if name in scope: self._report.already_declared(site, name)
		scope[name] = False

	def _define(self, name: str):
		if self._scopes: self._scopes[-1][name] = True

	def _function(self, fn: syntax.Function):
		if fn.arity() > MAX_PARAMETERS:
			self._report.too_many(fn, "parameters", MAX_PARAMETERS)
		self._function_depth += 1
		self._scopes.append({})
		for p in fn.params:
			self._declare(p, fn)
			self._define(p)
		self.tour(fn.body)
		self._scopes.pop()
		self._function_depth -= 1

	def _optional(self, item: Optional[Phrase]):
		if item is not None: self.visit(item)

	# Expressions

	@staticmethod
	def visit_Literal(expr: syntax.Literal): pass

	def visit_Lookup(self, expr: syntax.Lookup):
		if self._scopes and self._scopes[-1].get(expr.name) is False:
			self._report.own_initializer(expr, expr.name)

	def visit_Assign(self, expr: syntax.Assign):
		self.visit(expr.expr)

	def visit_BinExp(self, expr: syntax.BinExp):
		if expr.op not in PRIMITIVE_BINARY: self._report.unknown_operator(expr, expr.op)
		self.visit(expr.lhs)
		self.visit(expr.rhs)

	def visit_UnaryExp(self, expr: syntax.UnaryExp):
		if expr.op not in PRIMITIVE_UNARY: self._report.unknown_operator(expr, expr.op)
		self.visit(expr.arg)

	def visit_ShortCutExp(self, expr: syntax.ShortCutExp):
		if expr.op not in SHORTCUT: self._report.unknown_operator(expr, expr.op)
		self.visit(expr.lhs)
		self.visit(expr.rhs)

	def visit_Call(self, expr: syntax.Call):
		if len(expr.args) > MAX_ARGUMENTS:
			self._report.too_many(expr, "arguments", MAX_ARGUMENTS)
		self.visit(expr.fn_exp)
		self.tour(expr.args)

	def visit_LambdaForm(self, expr: syntax.LambdaForm):
		self._function(expr.function)

	# Statements

	def visit_ExprStmt(self, stmt: syntax.ExprStmt):
		self.visit(stmt.expr)

	def visit_Print(self, stmt: syntax.Print):
		self.visit(stmt.expr)

	def visit_VarDecl(self, stmt: syntax.VarDecl):
		self._declare(stmt.name, stmt)
		self._optional(stmt.init)
		self._define(stmt.name)

	def visit_FunDecl(self, stmt: syntax.FunDecl):
		# Defined before the body is checked, so the body may refer to itself.
		self._declare(stmt.name, stmt)
		self._define(stmt.name)
		self._function(stmt.function)

	def visit_Return(self, stmt: syntax.Return):
		if not self._function_depth: self._report.top_level_return(stmt)
		self._optional(stmt.expr)

	def visit_If(self, stmt: syntax.If):
		self.visit(stmt.if_part)
		self.visit(stmt.then_part)
		self._optional(stmt.else_part)

	def visit_While(self, stmt: syntax.While):
		self.visit(stmt.condition)
		self.visit(stmt.body)

	def visit_Block(self, stmt: syntax.Block):
		self._scopes.append({})
		self.tour(stmt.statements)
		self._scopes.pop()
