"""
The driver's side of error reporting.

The interpreter hands over at most one runtime error per call to `interpret`;
this keeps them, and knows how to explain them to a human on the console.
"""
import sys
from pathlib import Path
from typing import Optional
from boozetools.support.failureprone import SourceText, illustration

from .errors import LoxRuntimeError

EX_SOFTWARE = 70  # What a script exits with after a runtime error.

class Report:
	""" Collects runtime errors for whoever drives the interpreter. """
	_issues : list[LoxRuntimeError]

	def __init__(self, *, verbose:int=0, source:Optional[str]=None, path:Optional[Path]=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		if source is None:
			self._source = None
		else:
			self._source = SourceText(source, filename=str(path)) if path else SourceText(source)

	@property
	def issues(self): return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def reset(self):
		self._issues.clear()

	def exit_code(self) -> int:
		return EX_SOFTWARE if self._issues else 0

	def info(self, *args, level=1):
		if self._verbose >= level:
			print(*args, file=sys.stderr)

	def runtime_error(self, error:LoxRuntimeError):
		assert isinstance(error, LoxRuntimeError), error
		self._issues.append(error)
		self.info("Runtime error:", error.message, "at", repr(error.token.lexeme))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		for error in self._issues:
			print(self.explain(error), file=sys.stderr)
		sys.stderr.flush()

	def explain(self, error:LoxRuntimeError) -> str:
		lines = [str(error)]
		if self._source is not None and error.token.offset is not None:
			lines.append(Annotation(error, self._source).illustrate())
		return '\n'.join(lines)

	def assert_no_issues(self, message=""):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message or self._issues[0].message)

class Annotation:
	""" Points at the token an error blames, within the program's text. """
	def __init__(self, error:LoxRuntimeError, source:SourceText, caption:str=""):
		self.token = error.token
		self.source = source
		self.caption = caption or error.message
	def illustrate(self):
		row, col = self.source.find_row_col(self.token.offset)
		single_line = self.source.line_of_text(row)
		return illustration(single_line, col, self.token.width(), prefix='% 6d |' % row, caption=self.caption)
