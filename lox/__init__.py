"""
A tree-walking interpreter for a small subset of Lox.
Hand `Interpreter.interpret` a list of statements from `lox.syntax`.
"""
