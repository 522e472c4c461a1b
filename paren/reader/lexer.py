"""
  Paren Lexer

- Scans source text line by line into Token objects.
- Every token records its 1-based line and column for diagnostics.
- The first lexical fault on a line raises ParenTokenizingError; no partial
  token list is ever returned.

  Token kinds and their content:

    - (  )            -> LPAREN / RPAREN, no content
    - + - * / // % ^  -> OPERATOR, content is an Operator
      = != < <= > >=
    - 12  3.5  0x1F   -> NUMBER, content is an Int or Float value
      0b101  0o17  -4
    - "text"          -> STRING, content is the text between the quotes
    - name  long-name -> IDENTIFIER, content is the name
    - '               -> QUOTE, no content

  `-` directly followed by a digit is a signed numeric literal, not the
  subtraction operator, so `(-1)` scans as LPAREN NUMBER(-1) RPAREN.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator, Optional

from paren.errors import ParenTokenizingError
from paren.types.operator import Operator
from paren.types.value import INT_MAX, INT_MIN, Float, Int


class TokenKind(Enum):
    LPAREN = auto()
    RPAREN = auto()
    OPERATOR = auto()
    NUMBER = auto()
    IDENTIFIER = auto()
    STRING = auto()
    QUOTE = auto()


@dataclass(frozen=True)
class Position:
    line: int
    column: int

    def __str__(self):
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    position: Position
    content: Any = None

    def __str__(self):
        if self.content is None:
            return f"{self.kind.name}@{self.position}"
        return f"{self.kind.name}({self.content})@{self.position}"


DIGITS = frozenset("0123456789")

SINGLE_CHAR_OPERATORS: dict[str, Operator] = {
    "+": Operator.PLUS,
    "*": Operator.MUL,
    "%": Operator.MODULO,
    "^": Operator.POWER,
    "=": Operator.EQ,
}

# first char -> (operator alone, second char, operator for the pair)
TWO_CHAR_OPERATORS: dict[str, tuple[Optional[Operator], str, Operator]] = {
    ">": (Operator.GT, "=", Operator.GEQ),
    "<": (Operator.LT, "=", Operator.LEQ),
    "/": (Operator.DIV, "/", Operator.INT_DIV),
    "!": (None, "=", Operator.NEQ),
}

# longest decimal magnitude that can still fit in 64 bits
MAX_INT_DIGITS = len(str(INT_MAX))

RADIX_PREFIXES: dict[str, tuple[int, str]] = {
    "x": (16, "0123456789abcdefABCDEF"),
    "b": (2, "01"),
    "o": (8, "01234567"),
}


class _LineScanner:
    """Scans a single line; `pos` is a 0-based index into the line."""

    def __init__(self, line: str, line_number: int):
        self.line = line
        self.line_number = line_number
        self.pos = 0

    def peek(self, offset: int = 0) -> Optional[str]:
        i = self.pos + offset
        return self.line[i] if i < len(self.line) else None

    def position(self, index: Optional[int] = None) -> Position:
        return Position(self.line_number, (self.pos if index is None else index) + 1)

    def error(self, message: str, index: Optional[int] = None) -> ParenTokenizingError:
        pos = self.position(index)
        return ParenTokenizingError(message, pos.line, pos.column)

    def tokens(self) -> Iterator[Token]:
        while (c := self.peek()) is not None:
            if c.isspace():
                self.pos += 1
                continue

            start = self.position()

            if c == "(":
                self.pos += 1
                yield Token(TokenKind.LPAREN, start)
            elif c == ")":
                self.pos += 1
                yield Token(TokenKind.RPAREN, start)
            elif c == "'":
                self.pos += 1
                yield Token(TokenKind.QUOTE, start)
            elif c in DIGITS:
                yield Token(TokenKind.NUMBER, start, self._number(negative=False))
            elif c == "-":
                if self.peek(1) in DIGITS:
                    self.pos += 1
                    yield Token(TokenKind.NUMBER, start, self._number(negative=True))
                else:
                    self.pos += 1
                    yield Token(TokenKind.OPERATOR, start, Operator.MINUS)
            elif c in SINGLE_CHAR_OPERATORS:
                self.pos += 1
                yield Token(TokenKind.OPERATOR, start, SINGLE_CHAR_OPERATORS[c])
            elif c in TWO_CHAR_OPERATORS:
                yield Token(TokenKind.OPERATOR, start, self._operator(c))
            elif c == '"':
                yield Token(TokenKind.STRING, start, self._string())
            elif c.isalpha():
                yield Token(TokenKind.IDENTIFIER, start, self._identifier())
            else:
                raise self.error(f"Unrecognized token '{c}'")

    def _operator(self, c: str) -> Operator:
        alone, second, pair = TWO_CHAR_OPERATORS[c]
        if self.peek(1) == second:
            self.pos += 2
            return pair
        if alone is None:
            raise self.error(f"Expected '{second}' after '{c}'")
        self.pos += 1
        return alone

    def _number(self, negative: bool) -> Int | Float:
        start = self.pos
        if self.peek() == "0" and self.peek(1) in RADIX_PREFIXES:
            return self._radix_number(negative)

        seen_point = False
        while (c := self.peek()) is not None and (c in DIGITS or c == "."):
            if c == ".":
                if seen_point:
                    raise self.error("Invalid number: multiple decimal points found")
                seen_point = True
            self.pos += 1

        text = self.line[start:self.pos]
        if seen_point:
            value = float(text)
            return Float(-value if negative else value)
        digits = text.lstrip("0") or "0"
        if len(digits) > MAX_INT_DIGITS:
            raise self.error("Invalid number: integer literal out of range", start - negative)
        return self._checked_int(int(digits), negative, start)

    def _radix_number(self, negative: bool) -> Int:
        start = self.pos
        base, valid = RADIX_PREFIXES[self.peek(1)]
        self.pos += 2
        digits_start = self.pos
        while (c := self.peek()) is not None and (c.isalnum() or c == "."):
            if c == ".":
                raise self.error(f"Invalid number: base-{base} literals cannot have a fractional part")
            if c not in valid:
                raise self.error(f"Invalid digit '{c}' in base-{base} literal")
            self.pos += 1

        digits = self.line[digits_start:self.pos]
        if not digits:
            raise self.error(f"Invalid number: missing digits after '{self.line[start:self.pos]}'")
        return self._checked_int(int(digits, base), negative, start)

    def _checked_int(self, magnitude: int, negative: bool, start: int) -> Int:
        n = -magnitude if negative else magnitude
        if not INT_MIN <= n <= INT_MAX:
            # report at the sign, if any, so the column points at the whole literal
            raise self.error("Invalid number: integer literal out of range", start - negative)
        return Int(n)

    def _string(self) -> str:
        start = self.pos
        end = self.line.find('"', start + 1)
        if end == -1:
            raise self.error("Unclosed string", start)
        self.pos = end + 1
        return self.line[start + 1:end]

    def _identifier(self) -> str:
        start = self.pos
        while (c := self.peek()) is not None and (c.isalnum() or c == "-"):
            self.pos += 1
        return self.line[start:self.pos]


def lex_line(line: str, line_number: int = 1) -> list[Token]:
    """Scan one line of source into tokens."""
    return list(_LineScanner(line, line_number).tokens())


def lex(source: str) -> list[Token]:
    """Scan a (possibly multi-line) source string into a single token list."""
    tokens: list[Token] = []
    for line_number, line in enumerate(source.splitlines(), start=1):
        tokens.extend(lex_line(line, line_number))
    return tokens
