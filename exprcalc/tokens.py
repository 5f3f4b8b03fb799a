"""Tokens produced from an expression and consumed by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kind of a token."""

    NUMBER = 0
    OPERATOR = 1
    FUNCTION = 2
    END = 3


@dataclass
class Token:
    """One element of an expression.

    ``depth`` is the bracket nesting level of the token. ``number`` holds the
    value of NUMBER tokens; ``op`` holds the symbol or name of OPERATOR and
    FUNCTION tokens.
    """

    type: TokenType
    depth: int
    number: float = 0.0
    op: str | None = None

    @property
    def is_number(self) -> bool:
        """True if the token carries a numeric value."""
        return self.type is TokenType.NUMBER


def number_token(number: float, depth: int) -> Token:
    """Create a NUMBER token with the given value and depth."""
    return Token(TokenType.NUMBER, depth, number=float(number))


def function_token(name: str, depth: int) -> Token:
    """Create a FUNCTION token for a named function such as ``sin`` or ``!``."""
    return Token(TokenType.FUNCTION, depth, op=name)


def operator_token(op: str, depth: int) -> Token:
    """Create an OPERATOR token for a symbol such as ``+`` or ``*``."""
    return Token(TokenType.OPERATOR, depth, op=op)