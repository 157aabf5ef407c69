"""
Everything about telling the user that something went wrong.

Static problems are collected as issues on a Report and shown all together.
Run-time problems are exceptions (subclasses of Fault) which unwind every
enclosing call, collecting a stack trace as they go, until the executive
hands them to the Report.
"""
import sys, random
from typing import Any, Optional, Sequence
from .ontology import Phrase, SCRIPT

class TooManyIssues(Exception):
	pass

###############################################################################

class Fault(Exception):
	""" Root of the run-time failure kinds. Nothing in the language can catch these. """
	def __init__(self, message:str):
		super().__init__(message)
		self.message = message
		self.trace = []

	def unwound(self, site:Optional[Phrase], name:Optional[str]):
		""" Called once per frame on the way out, so the trace reads innermost-first. """
		line = site.line if site is not None else 0
		self.trace.append((line, name or SCRIPT))

class UnboundVariable(Fault):
	def __init__(self, name:str):
		super().__init__("Undefined variable '%s'." % name)
		self.name = name

class NotCallable(Fault):
	def __init__(self, value:Any):
		super().__init__("Can only call functions.")
		self.value = value

class ArityMismatch(Fault):
	def __init__(self, need:int, got:int):
		super().__init__("Expected %d arguments but got %d." % (need, got))
		self.need, self.got = need, got

class BadOperand(Fault):
	pass

class StackOverflow(Fault):
	def __init__(self):
		super().__init__("Stack overflow.")

###############################################################################

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm. ", "", ""]

	exclamations = [
		'Bother', 'Drat', 'Fiddlesticks', 'Nuts', 'Rats', 'Blast',
		'Good Grief', 'Great Scott', 'Jeepers', 'Mercy', 'Sakes Alive',
	]

	resignations = [
		'I cannot continue.',
		'That will not do.',
		'Somebody should have a look at this.',
		'Here is what I found.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, exclamations, resignations)))

class Pic:
	""" One issue: an introduction, then some lines of detail. """
	def __init__(self, intro:str, lines:Sequence[str]=(), footer=()):
		self._intro, self._lines, self._footer = intro, list(lines), footer
	def also(self, site:Phrase, caption:str=""):
		self._lines.append((site.where()+" "+caption).rstrip())
	def as_text(self):
		return '\n'.join([self._intro, *self._lines, *self._footer])

class Report:
	""" Collects issues; also where verbose chatter goes. """
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self): return tuple(self._issues)

	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def error(self, guilty: Sequence[Phrase], msg: str):
		""" Actually make an entry of an issue """
		pic = Pic(msg)
		for g in guilty: pic.also(g)
		self.issue(pic)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the static checker calls:

	def top_level_return(self, site:Phrase):
		self.error([site], "Illegal return statement in the top-level.")

	def already_declared(self, site:Phrase, name:str):
		pic = Pic("Already a variable with this name in this scope.")
		pic.also(site, repr(name))
		self.issue(pic)

	def own_initializer(self, site:Phrase, name:str):
		pic = Pic("Can't read local variable in its own initializer.")
		pic.also(site, repr(name))
		self.issue(pic)

	def too_many(self, site:Phrase, what:str, limit:int):
		self.error([site], "Can't have more than %d %s." % (limit, what))

	def unknown_operator(self, site:Phrase, op:str):
		pic = Pic("I don't know an operator called %r." % op)
		pic.also(site)
		self.issue(pic)

	# Methods the executive calls:

	def runtime_fault(self, fault:Fault):
		lines = ["[line %d] in %s" % (line, name if name == SCRIPT else name + "()") for line, name in fault.trace]
		self.issue(Pic(fault.message, lines))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
