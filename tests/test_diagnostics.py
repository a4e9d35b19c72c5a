import io
import unittest
from unittest import mock

from lox import diagnostics, syntax
from lox.errors import OperandTypeError, UndefinedVariable
from lox.interpreter import Interpreter
from lox.tokens import Token, TokenType

SOURCE = 'var a = 1;\nprint a + "b";\n'

def _plus_token():
	offset = SOURCE.index("+")
	return Token(TokenType.PLUS, "+", None, 2, offset)

class ReportTests(unittest.TestCase):

	def test_fresh_report_is_ok(self):
		report = diagnostics.Report()
		self.assertTrue(report.ok())
		self.assertFalse(report.sick())
		self.assertEqual(0, report.exit_code())
		report.assert_no_issues("nothing to see")

	def test_keeps_errors_in_order(self):
		report = diagnostics.Report()
		first = UndefinedVariable(Token(TokenType.IDENTIFIER, "x", None, 1))
		second = OperandTypeError(_plus_token(), "Operands must be numbers.")
		report.runtime_error(first)
		report.runtime_error(second)
		self.assertTrue(report.sick())
		self.assertEqual((first, second), report.issues)
		self.assertEqual(diagnostics.EX_SOFTWARE, report.exit_code())
		report.reset()
		self.assertTrue(report.ok())

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_complaint_names_message_and_line(self, err):
		report = diagnostics.Report()
		report.runtime_error(UndefinedVariable(Token(TokenType.IDENTIFIER, "zed", None, 4)))
		report.complain_to_console()
		self.assertIn("Undefined variable 'zed'.\n[line 4]", err.getvalue())

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_complaint_with_source_text(self, err):
		report = diagnostics.Report(source=SOURCE)
		report.runtime_error(OperandTypeError(_plus_token(), "Operands must be two numbers or two strings."))
		report.complain_to_console()
		text = err.getvalue()
		self.assertIn("Operands must be two numbers or two strings.", text)
		self.assertIn("[line 2]", text)

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_assert_no_issues_complains(self, err):
		report = diagnostics.Report()
		report.runtime_error(UndefinedVariable(Token(TokenType.IDENTIFIER, "q", None, 1)))
		with self.assertRaises(AssertionError):
			report.assert_no_issues("should have been clean")
		self.assertIn("'q'", err.getvalue())

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_verbosity_gates_chatter(self, err):
		quiet = diagnostics.Report()
		quiet.info("hush")
		self.assertEqual("", err.getvalue())
		chatty = diagnostics.Report(verbose=1)
		chatty.info("hello")
		chatty.info("deeper", level=2)
		self.assertEqual("hello\n", err.getvalue())

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_verbose_interpreter_traces(self, err):
		report = diagnostics.Report(verbose=2)
		interpreter = Interpreter(report)
		program = [syntax.Block([syntax.Var(Token(TokenType.IDENTIFIER, "a", None, 1))])]
		self.assertTrue(interpreter.interpret(program))
		self.assertIn("Entering", err.getvalue())
		self.assertIn("Leaving", err.getvalue())
		self.assertIn("Executed 1 statement(s).", err.getvalue())

if __name__ == '__main__':
	unittest.main()
