"""
Direct interpretation of the statement tree.

Values play themselves: nil is None, booleans are bool, numbers are float,
and strings are str. The interesting parts are the rules for what counts
as true, what counts as equal, and how a value looks when printed.
"""
import math
import operator
from decimal import Decimal
from typing import Any, Iterable, Optional, Union
from boozetools.support.foundation import Visitor

from . import syntax
from .tokens import Token, TokenType
from .environment import Environment
from .errors import LoxRuntimeError, OperandTypeError
from .diagnostics import Report

VALUE = Union[None, bool, float, str]

def _divide(a:float, b:float) -> float:
	# Python raises on zero divisors; IEEE-754 does not.
	if b == 0.0:
		if a == 0.0 or math.isnan(a): return math.nan
		return math.copysign(1.0, a) * math.copysign(1.0, b) * math.inf
	return a / b

NUMERIC_BINARY = {
	TokenType.MINUS: operator.sub,
	TokenType.SLASH: _divide,
	TokenType.STAR: operator.mul,
	TokenType.GREATER: operator.gt,
	TokenType.GREATER_EQUAL: operator.ge,
	TokenType.LESS: operator.lt,
	TokenType.LESS_EQUAL: operator.le,
}

def is_number(value:Any) -> bool:
	return isinstance(value, float)

def is_truthy(value:Any) -> bool:
	""" Only nil and false are false. Zero and the empty string are true. """
	if value is None: return False
	if isinstance(value, bool): return value
	return True

def is_equal(a:Any, b:Any) -> bool:
	"""
	No coercion: values of different kinds are never equal.
	The type check also keeps Python from deciding that true == 1.
	Numbers compare by value identity rather than IEEE-754 rules:
	NaN equals NaN, and zero does not equal negative zero.
	"""
	if a is None: return b is None
	if type(a) is not type(b): return False
	if isinstance(a, float): return _same_number(a, b)
	return a == b

def _same_number(a:float, b:float) -> bool:
	if math.isnan(a): return math.isnan(b)
	return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)

def _number_text(value:float) -> str:
	"""
	Plain decimal between 10**-3 and 10**7, otherwise scientific as in 1.5E-7.
	Either way the shortest digits that read back as the same float.
	"""
	magnitude = abs(value)
	if magnitude == 0.0 or 1e-3 <= magnitude < 1e7:
		return repr(value)
	_, digits, exponent = Decimal(repr(magnitude)).as_tuple()
	digits = list(digits)
	while len(digits) > 1 and digits[-1] == 0:
		digits.pop()
		exponent += 1
	head, tail = str(digits[0]), ''.join(map(str, digits[1:])) or "0"
	sign = "-" if value < 0 else ""
	return "%s%s.%sE%d"%(sign, head, tail, exponent + len(digits) - 1)

def stringify(value:Any) -> str:
	if value is None: return "nil"
	if isinstance(value, bool): return "true" if value else "false"
	if isinstance(value, float):
		if math.isnan(value): return "NaN"
		if math.isinf(value): return "Infinity" if value > 0 else "-Infinity"
		text = _number_text(value)
		if text.endswith(".0"): text = text[:-2]
		return text
	return str(value)

def _check_number_operand(operator_token:Token, operand:Any):
	if not is_number(operand):
		raise OperandTypeError(operator_token, "Operand must be a number.")

def _check_number_operands(operator_token:Token, left:Any, right:Any):
	if not (is_number(left) and is_number(right)):
		raise OperandTypeError(operator_token, "Operands must be numbers.")


class Interpreter(Visitor):
	"""
	Holds the current environment and walks the tree.
	One instance keeps its global state across calls to `interpret`,
	which is what a REPL wants.
	"""

	def __init__(self, report:Optional[Report]=None, global_env:Optional[Environment]=None):
		self._report = Report() if report is None else report
		self.globals = Environment() if global_env is None else global_env
		self._environment = self.globals

	@property
	def environment(self) -> Environment: return self._environment

	def interpret(self, statements:Iterable[syntax.Stmt]) -> bool:
		"""
		The one place a runtime error is caught. The first one stops the run,
		goes to the report, and whatever already printed stays printed.
		"""
		count = 0
		try:
			for statement in statements:
				self.execute(statement)
				count += 1
		except LoxRuntimeError as error:
			self._report.runtime_error(error)
			self._report.info("Stopped after %d statement(s)."%count)
			return False
		self._report.info("Executed %d statement(s)."%count)
		return True

	def evaluate(self, expr:syntax.Expr) -> VALUE:
		return self.visit(expr)

	def execute(self, stmt:syntax.Stmt):
		self.visit(stmt)

	def execute_block(self, statements:Iterable[syntax.Stmt], environment:Environment):
		previous = self._environment
		self._environment = environment
		self._report.info("Entering", environment, level=2)
		try:
			for statement in statements:
				self.execute(statement)
		finally:
			self._environment = previous
			self._report.info("Leaving", environment, level=2)

	###########################################################################

	def visit_Literal(self, expr:syntax.Literal):
		return expr.value

	def visit_Grouping(self, expr:syntax.Grouping):
		return self.evaluate(expr.expression)

	def visit_Unary(self, expr:syntax.Unary):
		right = self.evaluate(expr.right)
		kind = expr.operator.kind
		if kind is TokenType.MINUS:
			_check_number_operand(expr.operator, right)
			return -right
		if kind is TokenType.BANG:
			return not is_truthy(right)
		raise NotImplementedError(kind)

	def visit_Variable(self, expr:syntax.Variable):
		return self._environment.get(expr.name)

	def visit_Assign(self, expr:syntax.Assign):
		value = self.evaluate(expr.value)
		self._environment.assign(expr.name, value)
		return value

	def visit_Binary(self, expr:syntax.Binary):
		left = self.evaluate(expr.left)
		right = self.evaluate(expr.right)
		kind = expr.operator.kind
		if kind is TokenType.EQUAL_EQUAL: return is_equal(left, right)
		if kind is TokenType.BANG_EQUAL: return not is_equal(left, right)
		if kind is TokenType.PLUS:
			if is_number(left) and is_number(right): return left + right
			if isinstance(left, str) and isinstance(right, str): return left + right
			raise OperandTypeError(expr.operator, "Operands must be two numbers or two strings.")
		try: op = NUMERIC_BINARY[kind]
		except KeyError: raise NotImplementedError(kind)
		_check_number_operands(expr.operator, left, right)
		return op(left, right)

	###########################################################################

	def visit_Expression(self, stmt:syntax.Expression):
		self.evaluate(stmt.expression)

	def visit_Print(self, stmt:syntax.Print):
		value = self.evaluate(stmt.expression)
		print(stringify(value))

	def visit_Var(self, stmt:syntax.Var):
		value = None
		if stmt.initializer is not None:
			value = self.evaluate(stmt.initializer)
		self._environment.define(stmt.name.lexeme, value)

	def visit_Block(self, stmt:syntax.Block):
		self.execute_block(stmt.statements, Environment(self._environment))

	def visit_If(self, stmt:syntax.If):
		if is_truthy(self.evaluate(stmt.condition)):
			self.execute(stmt.then_branch)
		elif stmt.else_branch is not None:
			self.execute(stmt.else_branch)
