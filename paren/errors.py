from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from paren.reader.lexer import Token


class ParenError(Exception):
    """ Base class for all Paren errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParenTokenizingError(ParenError):
    """ Raised when the lexer meets a character sequence it cannot scan"""

    def __init__(self, message: str, line: int, column: int):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"Error on line {self.line}, column {self.column}: {self.message}"


class ParenParsingError(ParenError):
    """ Raised when the token sequence does not form a valid program"""

    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(message)
        self.token = token

    def __str__(self) -> str:
        if self.token is None:
            return f"Parsing Error: {self.message}"
        pos = self.token.position
        return f"Parsing Error on line {pos.line}, column {pos.column}: {self.message}"


class ParenRuntimeError(ParenError):
    """ Raised when a well-formed program fails during evaluation"""


class ParenTypeError(ParenRuntimeError):
    """ Raised when an operator is applied to operands of unsupported kinds"""


class ParenArityError(ParenRuntimeError):
    """ Raised when a special form receives the wrong number of operands"""


class ParenUnboundSymbol(ParenRuntimeError):
    """ Raised when an identifier is neither bound nor a special form"""


class ParenNotImplementedError(ParenRuntimeError):
    """ Raised when evaluation reaches a form with no evaluation rule"""
