"""
This is the overall control for a program run:
check it, build the root environment, run it, and
turn whatever went wrong into a report and an exit status.
"""
from typing import Sequence, TextIO
from . import runtime  # NOQA: registers the evaluation methods
from .syntax import Statement
from .stacking import RootFrame
from .evaluator import execute_all
from .primitive import install_natives
from .resolution import StaticCheck
from .diagnostics import Report, Fault, StackOverflow, TooManyIssues

OK = 0
COMPILE_ERROR = 65
RUNTIME_ERROR = 70

MAX_DEPTH = 64

def prepare_root(out:TextIO=None, max_depth:int=MAX_DEPTH) -> RootFrame:
	root = RootFrame(out, max_depth)
	install_natives(root)
	return root

def check_program(statements:Sequence[Statement], report:Report) -> bool:
	""" True if the static pass adds no issues to the report. """
	before = len(report.issues)
	try: StaticCheck(report).check_program(statements)
	except TooManyIssues: pass
	return len(report.issues) == before

def run_program(statements:Sequence[Statement], report:Report, out:TextIO=None, max_depth:int=MAX_DEPTH) -> int:
	if not check_program(statements, report):
		report.complain_to_console()
		return COMPILE_ERROR
	root = prepare_root(out, max_depth)
	report.info("Run:", len(statements), "top-level statement(s), max depth", max_depth)
	try:
		try: execute_all(statements, root)
		except RecursionError:
			# The host ran out of stack before our own limit kicked in.
			raise StackOverflow() from None
	except Fault as fault:
		fault.unwound(root.pc, None)
		report.runtime_fault(fault)
		report.complain_to_console()
		return RUNTIME_ERROR
	return OK
