"""
The primitive namespace: operators the evaluator applies, and
the native functions installed in the root environment.
"""
import math
import operator
import time
from .values import Primitive, as_double, is_number, is_equal, is_truthy
from .diagnostics import BadOperand
from .stacking import RootFrame

def _numeric(op):
	def checked(a, b):
		if is_number(a) and is_number(b): return op(as_double(a), as_double(b))
		raise BadOperand("Operands must be numbers.")
	return checked

def _add(a, b):
	if is_number(a) and is_number(b): return as_double(a) + as_double(b)
	if isinstance(a, str) and isinstance(b, str): return a + b
	raise BadOperand("Operands must be two numbers or two strings.")

def _divide(a, b):
	# IEEE semantics, not Python's: dividing by zero is not an error.
	if b == 0:
		if a == 0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)
	return a / b

def _negate(a):
	if is_number(a): return -as_double(a)
	raise BadOperand("Operand must be a number.")

PRIMITIVE_BINARY = {
	"+"  : _add,
	"-"  : _numeric(operator.sub),
	"*"  : _numeric(operator.mul),
	"/"  : _numeric(_divide),
	"<"  : _numeric(operator.lt),
	"<=" : _numeric(operator.le),
	">"  : _numeric(operator.gt),
	">=" : _numeric(operator.ge),
	"==" : is_equal,
	"!=" : lambda a, b: not is_equal(a, b),
}
PRIMITIVE_UNARY = {
	"-" : _negate,
	"!" : lambda a: not is_truthy(a),
}
SHORTCUT = {
	"and":False,
	"or":True,
}

###############################################################################

def _is_nan(x): return isinstance(x, float) and math.isnan(x)

NATIVES = {
	"clock": (time.process_time, 0),
	"now": (time.time, 0),
	"isNaN": (_is_nan, 1),
}

def install_natives(root:RootFrame):
	for name, (fn, arity) in NATIVES.items():
		root.define(name, Primitive(name, fn, arity))
