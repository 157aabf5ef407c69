"""
The set of parse-nodes in simple form.
A parser (not part of this package) would call these constructors bottom-up;
tests and the demonstration program call them directly.
Every constructor takes an optional line number last, for stack traces and complaints.
"""
from typing import Optional, Any, Sequence
from .ontology import ValueExpression, Statement, Phrase

class Function(Phrase):
	"""
	The declaration part of a function: what a Closure pairs with its natal frame.
	Anonymous functions have no name.
	"""
	def __init__(self, name: Optional[str], params: Sequence[str], body: Sequence[Statement], line: int = 0):
		assert all(isinstance(p, str) for p in params), params
		assert all(isinstance(s, Statement) for s in body), body
		self.name = name
		self.params = tuple(params)
		self.body = tuple(body)
		self.line = line
	def arity(self) -> int: return len(self.params)
	def __repr__(self): return "{fn|%s(%s)}" % (self.name or "", ", ".join(self.params))

###############################################################################

class Literal(ValueExpression):
	def __init__(self, value: Any, line: int = 0):
		self.value, self.line = value, line
	def __str__(self): return "<Literal %r>" % self.value

def truth(line=0): return Literal(True, line)
def falsehood(line=0): return Literal(False, line)
def nil(line=0): return Literal(None, line)

class Lookup(ValueExpression):
	def __init__(self, name: str, line: int = 0):
		assert isinstance(name, str), type(name)
		self.name, self.line = name, line
	def __str__(self): return self.name

class Assign(ValueExpression):
	""" Assignment is an expression: it yields the value assigned. """
	def __init__(self, name: str, expr: ValueExpression, line: int = 0):
		assert isinstance(expr, ValueExpression), type(expr)
		self.name, self.expr, self.line = name, expr, line
	def __str__(self): return "(%s = %s)" % (self.name, self.expr)

class BinExp(ValueExpression):
	def __init__(self, lhs: ValueExpression, op: str, rhs: ValueExpression, line: int = 0):
		self.lhs, self.op, self.rhs, self.line = lhs, op, rhs, line
	def __str__(self): return "(%s %s %s)" % (self.lhs, self.op, self.rhs)

class UnaryExp(ValueExpression):
	def __init__(self, op: str, arg: ValueExpression, line: int = 0):
		self.op, self.arg, self.line = op, arg, line
	def __str__(self): return "(%s%s)" % (self.op, self.arg)

class ShortCutExp(ValueExpression):
	""" The logical connectives "and" and "or", which may skip the right-hand side. """
	def __init__(self, lhs: ValueExpression, op: str, rhs: ValueExpression, line: int = 0):
		self.lhs, self.op, self.rhs, self.line = lhs, op, rhs, line
	def __str__(self): return "(%s %s %s)" % (self.lhs, self.op, self.rhs)

class Call(ValueExpression):
	def __init__(self, fn_exp: ValueExpression, args: Sequence[ValueExpression] = (), line: int = 0):
		self.fn_exp, self.args, self.line = fn_exp, tuple(args), line
	def __str__(self): return "%s(%s)" % (self.fn_exp, ", ".join(map(str, self.args)))

class LambdaForm(ValueExpression):
	def __init__(self, params: Sequence[str], body: Sequence[Statement], line: int = 0):
		self.function = Function(None, params, body, line)
		self.line = line
	def __str__(self): return "<lambda>"

###############################################################################

class ExprStmt(Statement):
	def __init__(self, expr: ValueExpression, line: int = 0):
		assert isinstance(expr, ValueExpression), type(expr)
		self.expr, self.line = expr, line

class Print(Statement):
	def __init__(self, expr: ValueExpression, line: int = 0):
		assert isinstance(expr, ValueExpression), type(expr)
		self.expr, self.line = expr, line

class VarDecl(Statement):
	def __init__(self, name: str, init: Optional[ValueExpression] = None, line: int = 0):
		self.name, self.init, self.line = name, init, line

class FunDecl(Statement):
	def __init__(self, name: str, params: Sequence[str], body: Sequence[Statement], line: int = 0):
		self.function = Function(name, params, body, line)
		self.line = line
	@property
	def name(self): return self.function.name

class Return(Statement):
	def __init__(self, expr: Optional[ValueExpression] = None, line: int = 0):
		self.expr, self.line = expr, line

class If(Statement):
	def __init__(self, if_part: ValueExpression, then_part: Statement, else_part: Optional[Statement] = None, line: int = 0):
		assert isinstance(then_part, Statement), type(then_part)
		self.if_part, self.then_part, self.else_part, self.line = if_part, then_part, else_part, line

class While(Statement):
	def __init__(self, condition: ValueExpression, body: Statement, line: int = 0):
		self.condition, self.body, self.line = condition, body, line

class Block(Statement):
	def __init__(self, statements: Sequence[Statement], line: int = 0):
		self.statements, self.line = tuple(statements), line
