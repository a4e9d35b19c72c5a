"""
Simplest possible environment concept.

This is the canonical list-structured search: each scope holds its own
bindings and a link to the scope it was made inside. Nothing is resolved
ahead of time; every lookup walks the chain afresh.
"""
from typing import Any, Optional
from .tokens import Token
from .errors import UndefinedVariable

class Environment:
	_bindings: dict[str, Any]

	def __init__(self, enclosing:Optional["Environment"]=None):
		self._bindings = {}
		self._enclosing = enclosing

	@property
	def enclosing(self) -> Optional["Environment"]: return self._enclosing

	def __contains__(self, name:str) -> bool: return name in self._bindings

	def __repr__(self):
		depth, env = 0, self._enclosing
		while env is not None: depth, env = depth+1, env._enclosing
		return "<Environment depth=%d %s>"%(depth, sorted(self._bindings))

	def define(self, name:str, value:Any):
		""" Redeclaration in the same scope simply replaces the old binding. """
		self._bindings[name] = value

	def get(self, name:Token) -> Any:
		env = self
		while env is not None:
			try: return env._bindings[name.lexeme]
			except KeyError: env = env._enclosing
		raise UndefinedVariable(name)

	def assign(self, name:Token, value:Any):
		""" Overwrite the nearest existing binding. Never creates one. """
		env = self
		while env is not None:
			if name.lexeme in env._bindings:
				env._bindings[name.lexeme] = value
				return
			env = env._enclosing
		raise UndefinedVariable(name)
