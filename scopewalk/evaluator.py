"""
The generic machinery that everything needs,
without the specific methods corresponding to particular syntax.
Those live in the runtime module, which registers them here on import.
"""

from typing import Any, Iterable
from .ontology import ValueExpression, Statement
from .stacking import Frame

EVALUATE = {}
EXECUTE = {}

def evaluate(expr:ValueExpression, frame:Frame) -> Any:
	assert isinstance(frame, Frame), type(frame)
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise NotImplementedError(type(expr), expr)
	return fn(expr, frame)

def execute(stmt:Statement, frame:Frame) -> None:
	try: fn = EXECUTE[type(stmt)]
	except KeyError: raise NotImplementedError(type(stmt), stmt)
	frame.activation.pc = stmt
	fn(stmt, frame)

def execute_all(statements:Iterable[Statement], frame:Frame) -> None:
	for stmt in statements:
		execute(stmt, frame)

class Returning(Exception):
	"""
	How a return statement leaves its call. Only the Closure that made
	the activation catches it, so it never escapes into the caller.
	"""
	def __init__(self, value):
		super().__init__()
		self.value = value

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"): table = EVALUATE
		elif _k.startswith("_exec_"): table = EXECUTE
		else: continue
		_t = _v.__annotations__["expr"] if table is EVALUATE else _v.__annotations__["stmt"]
		assert isinstance(_t, type), (_k, _t)
		table[_t] = _v
