import io
import unittest
from unittest.mock import patch

from scopewalk import cmdline, demo, diagnostics, executive

class DemonstrationSmokeTests(unittest.TestCase):
	""" Run the demonstration; Test for no smoke. """

	def test_end_to_end(self):
		report = diagnostics.Report(verbose=False)
		out = io.StringIO()
		status = executive.run_program(demo.program(), report, out=out)
		report.assert_no_issues("The demonstration program failed.")
		self.assertEqual(executive.OK, status)
		self.assertEqual("55\n1\n2\n3\n", out.getvalue())

	def test_variations(self):
		for n, calls, expect in [
			(0, 0, ["0"]),
			(1, 1, ["1", "1"]),
			(15, 5, ["610", "1", "2", "3", "4", "5"]),
		]:
			with self.subTest(n=n, calls=calls):
				out = io.StringIO()
				status = executive.run_program(demo.program(n, calls), diagnostics.Report(), out=out)
				self.assertEqual(executive.OK, status)
				self.assertEqual(expect, out.getvalue().splitlines())

	def test_each_run_gets_a_fresh_root(self):
		first, second = io.StringIO(), io.StringIO()
		executive.run_program(demo.closure_program(2), diagnostics.Report(), out=first)
		executive.run_program(demo.closure_program(2), diagnostics.Report(), out=second)
		self.assertEqual(first.getvalue(), second.getvalue())

class CommandLineTests(unittest.TestCase):

	@patch("sys.stdout", new_callable=io.StringIO)
	def test_default_run(self, stdout):
		with self.assertRaises(SystemExit) as cm:
			cmdline.main([])
		self.assertEqual(0, cm.exception.code)
		self.assertEqual("55\n1\n2\n3\n", stdout.getvalue())

	@patch("sys.stdout", new_callable=io.StringIO)
	def test_arguments(self, stdout):
		with self.assertRaises(SystemExit) as cm:
			cmdline.main(["--fib", "12", "--calls", "2"])
		self.assertEqual(0, cm.exception.code)
		self.assertEqual("144\n1\n2\n", stdout.getvalue())

	@patch("sys.stderr", new_callable=io.StringIO)
	@patch("sys.stdout", new_callable=io.StringIO)
	def test_check_only(self, stdout, stderr):
		with self.assertRaises(SystemExit) as cm:
			cmdline.main(["--check"])
		self.assertEqual(0, cm.exception.code)
		self.assertEqual("", stdout.getvalue())
		self.assertIn("Looks plausible to me.", stderr.getvalue())

	@patch("sys.stderr", new_callable=io.StringIO)
	@patch("sys.stdout", new_callable=io.StringIO)
	def test_stack_overflow_exit_status(self, stdout, stderr):
		with self.assertRaises(SystemExit) as cm:
			cmdline.main(["--fib", "10", "--max-depth", "5"])
		self.assertEqual(executive.RUNTIME_ERROR, cm.exception.code)
		self.assertEqual("", stdout.getvalue())
		self.assertIn("Stack overflow.", stderr.getvalue())
		self.assertIn("in fib()", stderr.getvalue())

	@patch("sys.stderr", new_callable=io.StringIO)
	@patch("sys.stdout", new_callable=io.StringIO)
	def test_verbose_chatter_goes_to_stderr(self, stdout, stderr):
		with self.assertRaises(SystemExit):
			cmdline.main(["-v"])
		self.assertEqual("55\n1\n2\n3\n", stdout.getvalue())
		self.assertIn("Static check:", stderr.getvalue())

if __name__ == '__main__':
	unittest.main()
