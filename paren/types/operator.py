from __future__ import annotations

from enum import Enum


class Operator(Enum):
    """Variadic arithmetic and comparison operators, keyed by their source spelling."""

    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    INT_DIV = "//"
    MODULO = "%"
    POWER = "^"
    EQ = "="
    NEQ = "!="
    LT = "<"
    LEQ = "<="
    GT = ">"
    GEQ = ">="

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
