"""
The set of parse-nodes in simple form.
A parser builds these bottom-up; the interpreter only ever reads them.
Dispatch happens by class name through a boozetools Visitor,
so a new kind of node needs only a new class here and a new visit_ method there.
"""
from typing import Any, Optional, Sequence
from .tokens import Token

class Phrase:
	def head(self) -> Optional[Token]:
		""" The token most worth pointing at when something goes wrong here. """
		raise NotImplementedError(type(self))

class Expr(Phrase): pass

class Stmt(Phrase): pass

###############################################################################

class Literal(Expr):
	def __init__(self, value:Any, token:Optional[Token]=None):
		self.value = value
		self.token = token
	def head(self): return self.token
	def __repr__(self): return "<lit %r>"%(self.value,)

class Grouping(Expr):
	def __init__(self, expression:Expr):
		self.expression = expression
	def head(self): return self.expression.head()
	def __repr__(self): return "(%r)"%(self.expression,)

class Unary(Expr):
	def __init__(self, operator:Token, right:Expr):
		self.operator, self.right = operator, right
	def head(self): return self.operator
	def __repr__(self): return "(%s %r)"%(self.operator.lexeme, self.right)

class Binary(Expr):
	def __init__(self, left:Expr, operator:Token, right:Expr):
		self.left, self.operator, self.right = left, operator, right
	def head(self): return self.operator
	def __repr__(self): return "(%r %s %r)"%(self.left, self.operator.lexeme, self.right)

class Variable(Expr):
	def __init__(self, name:Token):
		self.name = name
	def head(self): return self.name
	def __repr__(self): return "<ref:%s>"%self.name.lexeme

class Assign(Expr):
	def __init__(self, name:Token, value:Expr):
		self.name, self.value = name, value
	def head(self): return self.name
	def __repr__(self): return "(%s = %r)"%(self.name.lexeme, self.value)

###############################################################################

class Expression(Stmt):
	def __init__(self, expression:Expr):
		self.expression = expression
	def head(self): return self.expression.head()
	def __repr__(self): return "<do %r>"%(self.expression,)

class Print(Stmt):
	def __init__(self, expression:Expr, keyword:Optional[Token]=None):
		self.expression = expression
		self.keyword = keyword
	def head(self): return self.keyword or self.expression.head()
	def __repr__(self): return "<print %r>"%(self.expression,)

class Var(Stmt):
	def __init__(self, name:Token, initializer:Optional[Expr]=None):
		self.name = name
		self.initializer = initializer
	def head(self): return self.name
	def __repr__(self): return "<var %s>"%self.name.lexeme

class Block(Stmt):
	def __init__(self, statements:Sequence[Stmt], brace:Optional[Token]=None):
		self.statements = tuple(statements)
		self.brace = brace
	def head(self): return self.brace
	def __repr__(self): return "{%s}"%"; ".join(map(repr, self.statements))

class If(Stmt):
	def __init__(self, condition:Expr, then_branch:Stmt, else_branch:Optional[Stmt]=None):
		self.condition = condition
		self.then_branch = then_branch
		self.else_branch = else_branch
	def head(self): return self.condition.head()
	def __repr__(self):
		if self.else_branch is None: return "<if %r then %r>"%(self.condition, self.then_branch)
		return "<if %r then %r else %r>"%(self.condition, self.then_branch, self.else_branch)
