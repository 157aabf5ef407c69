"""
This module defines the specialized value-types that the tree-walker operates in terms of.
Basic primitive values play themselves: None is nil, and Python's bool, int, float
and str are the booleans, numbers and strings. Callable things need more help.
"""
import math
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence
from . import syntax
from .stacking import Frame, Activation
from .evaluator import execute_all, Returning
from .diagnostics import Fault, ArityMismatch, StackOverflow

class Function(ABC):
	""" A run-time object that can be applied with arguments. """
	@abstractmethod
	def arity(self) -> int: pass

	@abstractmethod
	def apply(self, args: Sequence[Any], caller: Frame) -> Any: pass

	def check_arity(self, args: Sequence[Any]):
		if len(args) != self.arity():
			raise ArityMismatch(self.arity(), len(args))

class Closure(Function):
	""" The run-time manifestation of a function: a callable value tied to its natal environment. """

	def __init__(self, static_link: Frame, function: syntax.Function):
		self._static_link = static_link
		self._function = function

	def __str__(self):
		return "<fn %s>" % self._function.name if self._function.name else "<fn>"

	def _name(self): return self._function.name or "fn"

	def arity(self) -> int: return self._function.arity()

	def apply(self, args: Sequence[Any], caller: Frame) -> Any:
		self.check_arity(args)
		# The new frame hangs off the captured environment, not the caller's.
		inner = Activation(self._static_link, caller, self._function)
		if inner.is_too_deep(): raise StackOverflow()
		for param, arg in zip(self._function.params, args):
			inner.define(param, arg)
		try:
			execute_all(self._function.body, inner)
		except Returning as ret:
			return ret.value
		except Fault as fault:
			fault.unwound(inner.pc, self._name())
			raise

class Primitive(Function):
	""" A function supplied by the host. Also a kind of value, like a closure. """
	def __init__(self, name: str, fn: Callable, arity: int):
		self._name = name
		self._fn = fn
		self._arity = arity

	def __str__(self): return "<native fn>"

	def arity(self) -> int: return self._arity

	def apply(self, args: Sequence[Any], caller: Frame) -> Any:
		self.check_arity(args)
		return self._fn(*args)

###############################################################################

def kind_of(value: Any) -> str:
	if value is None: return "nil"
	if isinstance(value, bool): return "boolean"  # Before int: bool is a subclass.
	if isinstance(value, (int, float)): return "number"
	if isinstance(value, str): return "string"
	if isinstance(value, Function): return "function"
	raise TypeError(type(value))

def is_number(value: Any) -> bool:
	return kind_of(value) == "number"

def is_truthy(value: Any) -> bool:
	return not (value is None or value is False)

def as_double(value: Any) -> float:
	""" Numbers are IEEE doubles. An integer too big for one is an infinity. """
	try: return float(value)
	except OverflowError: return math.inf if value > 0 else -math.inf

def is_equal(a: Any, b: Any) -> bool:
	kind = kind_of(a)
	if kind != kind_of(b): return False
	if kind == "function": return a is b
	if kind == "number": return as_double(a) == as_double(b)
	return a == b

def display(value: Any) -> str:
	""" How print renders a value. """
	kind = kind_of(value)
	if kind == "nil": return "nil"
	if kind == "boolean": return "true" if value else "false"
	if kind == "number":
		number = as_double(value)
		if number.is_integer() and abs(number) < 1e16: return "%d" % number
		return "%g" % number
	return str(value)
