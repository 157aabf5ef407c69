"""
Environments and activation records for the tree-walking run-time.

A Frame is one scope: a dictionary whose entries are the mutable cells of
its variables, plus a static link to the enclosing scope. Closures hold a
reference to the Frame they were born in, so a Frame lives exactly as long
as something (a closure, a child frame, or the running code) can reach it.

An Activation is the Frame made for one call. It also knows its caller
(the dynamic link), what it is running, and how deep the call stack is.
"""

import sys
from typing import Any, Optional, TextIO
from .ontology import Phrase, Statement
from .diagnostics import UnboundVariable

class Frame:
	_bindings : dict[str, Any]
	static_link : Optional["Frame"]
	activation : "Frame"      # The nearest enclosing call (or the root).
	root : "RootFrame"
	pc : Optional[Statement] = None
	depth : int = 0

	def __init__(self, static_link:"Frame", activation:"Frame"):
		self._bindings = {}
		self.static_link = static_link
		self.activation = activation
		self.root = static_link.root

	def __repr__(self): return "<%s %s>" % (type(self).__name__, sorted(self._bindings))

	def holds(self, name:str) -> bool: return name in self._bindings

	def define(self, name:str, value:Any):
		""" Make (or remake) a cell in this very frame, shadowing any outer one. """
		self._bindings[name] = value
		return value

	def chase(self, name:str) -> "Frame":
		""" The nearest frame, outward along static links, with a cell for this name. """
		frame = self
		while frame is not None:
			if name in frame._bindings: return frame
			frame = frame.static_link
		raise UnboundVariable(name)

	def get(self, name:str) -> Any:
		return self.chase(name)._bindings[name]

	def set(self, name:str, value:Any):
		""" Assignment never creates a binding; it only updates an existing cell. """
		self.chase(name)._bindings[name] = value
		return value

	def child(self) -> "Frame":
		""" A nested scope, e.g. for a block. It belongs to the same activation. """
		return Frame(self, self.activation)

class RootFrame(Frame):
	"""
	The global scope. Made once per program run, and it owns
	the resources a program run needs: the output sink and the depth limit.
	"""
	def __init__(self, out:TextIO=None, max_depth:int=64):
		self._bindings = {}
		self.static_link = None
		self.activation = self
		self.root = self
		self.out = out if out is not None else sys.stdout
		self.max_depth = max_depth

	def emit(self, text:str):
		print(text, file=self.out)

class Activation(Frame):
	def __init__(self, static_link:Frame, dynamic_link:Frame, breadcrumb:Phrase):
		super().__init__(static_link, self)
		self.dynamic_link = dynamic_link
		self.breadcrumb = breadcrumb
		self.depth = dynamic_link.activation.depth + 1

	def is_too_deep(self) -> bool:
		return self.depth >= self.root.max_depth
