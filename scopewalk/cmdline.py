"""
Runs the demonstration program: a naive recursive Fibonacci,
then a closure that counts how many times it has been called.

For example:

    scopewalk

prints 55, 1, 2, 3 one per line.

    scopewalk --fib 15 --calls 5 -v

prints fib(15) and counts to five, chattering on stderr as it goes.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="scopewalk",
	description="Tree-walking evaluator with lexical closures.",
	epilog=__doc__,
	formatter_class=argparse.RawDescriptionHelpFormatter,
)
parser.add_argument("--fib", type=int, default=10, metavar="N", help="which Fibonacci number to compute (default 10)")
parser.add_argument("--calls", type=int, default=3, metavar="N", help="how many times to call the closure (default 3)")
parser.add_argument("--max-depth", type=int, default=None, metavar="N", help="how deep calls may nest before a stack overflow")
parser.add_argument('-v', "--verbose", action="count", help="Say what is happening on stderr.")
parser.add_argument('-c', "--check", action="store_true", help="Check the program but do not actually run it.")

def run(args) -> int:
	from .diagnostics import Report
	from .executive import run_program, check_program, MAX_DEPTH, OK, COMPILE_ERROR
	from . import demo
	report = Report(verbose=args.verbose)
	statements = demo.program(args.fib, args.calls)
	if args.check:
		if check_program(statements, report):
			print("Looks plausible to me.", file=sys.stderr)
			return OK
		report.complain_to_console()
		return COMPILE_ERROR
	max_depth = MAX_DEPTH if args.max_depth is None else args.max_depth
	return run_program(statements, report, max_depth=max_depth)

def main(argv=None):
	sys.exit(run(parser.parse_args(argv)))
