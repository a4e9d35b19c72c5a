"""
Things that go wrong while a program runs.
Each carries the token to blame, so the report can point at it.
"""
from .tokens import Token

class LoxRuntimeError(Exception):
	def __init__(self, token:Token, message:str):
		super().__init__(message)
		self.token = token
		self.message = message

	def line(self) -> int: return self.token.line

	def __str__(self): return "%s\n[line %d]"%(self.message, self.token.line)

class OperandTypeError(LoxRuntimeError):
	""" An operator got operands of the wrong run-time type. """

class UndefinedVariable(LoxRuntimeError):
	def __init__(self, name:Token):
		super().__init__(name, "Undefined variable '%s'."%name.lexeme)
