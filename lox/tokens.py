"""
The agreement between whatever scans Lox text and everything downstream.
The scanner is not here; it only has to hand over these.
"""
from enum import Enum, auto
from typing import Any, NamedTuple, Optional

class TokenType(Enum):
	# Single-character tokens.
	LEFT_PAREN = auto()
	RIGHT_PAREN = auto()
	LEFT_BRACE = auto()
	RIGHT_BRACE = auto()
	COMMA = auto()
	DOT = auto()
	MINUS = auto()
	PLUS = auto()
	SEMICOLON = auto()
	SLASH = auto()
	STAR = auto()

	# One or two character tokens.
	BANG = auto()
	BANG_EQUAL = auto()
	EQUAL = auto()
	EQUAL_EQUAL = auto()
	GREATER = auto()
	GREATER_EQUAL = auto()
	LESS = auto()
	LESS_EQUAL = auto()

	# Literals.
	IDENTIFIER = auto()
	STRING = auto()
	NUMBER = auto()

	# Keywords.
	AND = auto()
	CLASS = auto()
	ELSE = auto()
	FALSE = auto()
	FUN = auto()
	FOR = auto()
	IF = auto()
	NIL = auto()
	OR = auto()
	PRINT = auto()
	RETURN = auto()
	SUPER = auto()
	THIS = auto()
	TRUE = auto()
	VAR = auto()
	WHILE = auto()

	EOF = auto()

class Token(NamedTuple):
	kind: TokenType
	lexeme: str
	literal: Any
	line: int
	offset: Optional[int] = None  # Index into the source text, if the scanner kept track.

	def __str__(self): return self.lexeme

	def width(self) -> int: return max(len(self.lexeme), 1)
