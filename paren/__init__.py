# Core type aliases for Paren.
#
# Source text is read into Token objects (paren.reader.lexer), parsed into a tree
# of Node objects (paren.types.node) and reduced to a Value (paren.types.value).
#
# Naming guidance:
# - AstNode:  Use in parser/evaluator code to denote a parsed form.
# - Value:    Use in evaluator/runtime code to denote an evaluated result.
#
# The alias below is only for annotations; the concrete classes live in
# paren.types.

from typing import Any, Callable

# Evaluator function type: passed into special forms so they can reduce their operands
EvaluatorFn = Callable[..., Any]
