"""Evaluation of a token list, innermost brackets first.

All functions work on the token list in place: reduced operands and
operators are removed and their result is stored in the surviving token.
"""

from __future__ import annotations

from exprcalc.calculations import fact, fib
from exprcalc.operators import Function, find_function
from exprcalc.support import (
    degrees_to_radians,
    gives_radians,
    radians_to_degrees,
    takes_radians,
)
from exprcalc.tokens import Token, TokenType


class InvalidExpressionError(ValueError):
    """Raised when the tokens do not form a valid expression."""


def _operand(tokens: list[Token], index: int) -> Token:
    """Return the NUMBER token at ``index`` or raise."""
    if not 0 <= index < len(tokens) or tokens[index].type is not TokenType.NUMBER:
        raise InvalidExpressionError(f"expected a number at position {index}")
    return tokens[index]


def _matching(token: Token, kind: TokenType, depth: int, priority: int) -> Function | None:
    """Return the table entry for ``token`` if it is to be reduced in this pass."""
    if token.depth != depth or token.type is not kind or token.op is None:
        return None
    function = find_function(token.op)
    if function is None or function.priority != priority:
        return None
    return function


def evaluate_expression(tokens: list[Token], depth: int) -> float:
    """Reduce ``tokens`` from ``depth`` down to the top level and return the result."""
    while depth > 0:
        evaluate_functions(tokens, depth)
        evaluate_mul_div(tokens, depth)
        evaluate_sum_sub(tokens, depth)
        depth -= 1
    if not tokens or tokens[0].type is not TokenType.NUMBER:
        raise InvalidExpressionError("expression does not reduce to a number")
    return tokens[0].number


def evaluate_mul_div(tokens: list[Token], depth: int) -> None:
    """Apply the multiplicative operators at ``depth``, left to right."""
    i = 1
    while i < len(tokens):
        function = _matching(tokens[i], TokenType.OPERATOR, depth, 2)
        if function is None:
            i += 1
            continue
        if function.params == 2:
            left = _operand(tokens, i - 1)
            right = _operand(tokens, i + 1)
            left.number = function.func(left.number, right.number)
            del tokens[i : i + 2]
        elif function.params == 1:
            left = _operand(tokens, i - 1)
            left.number = function.func(left.number)
            del tokens[i]
        else:
            i += 1


def evaluate_sum_sub(tokens: list[Token], depth: int) -> None:
    """Apply the additive operators at ``depth``, then lift that level one up."""
    i = 0
    while i < len(tokens):
        function = _matching(tokens[i], TokenType.OPERATOR, depth, 3)
        if function is None or function.params != 2:
            i += 1
            continue
        left = _operand(tokens, i - 1)
        right = _operand(tokens, i + 1)
        left.number = function.func(left.number, right.number)
        del tokens[i : i + 2]

    for token in tokens:
        if token.depth == depth:
            token.depth -= 1


def _is_integral(value: float) -> bool:
    return float(value).is_integer()


def evaluate_functions(tokens: list[Token], depth: int) -> None:
    """Apply the named functions and the factorial at ``depth``."""
    i = 0
    while i < len(tokens):
        token = tokens[i]
        function = _matching(token, TokenType.FUNCTION, depth, 1)
        if function is None:
            i += 1
            continue

        if token.op == "!":
            if i == 0:
                raise InvalidExpressionError("factorial without an operand")
            left = _operand(tokens, i - 1)
            if not _is_integral(left.number):
                raise InvalidExpressionError("factorial of a non-integer")
            left.number = fact(left.number)
            del tokens[i]
        elif function.params == 1:
            argument = _operand(tokens, i + 1).number
            func = function.func
            if func is fib and not _is_integral(argument):
                raise InvalidExpressionError("fib of a non-integer")
            if takes_radians(func):
                result = func(degrees_to_radians(argument))
            else:
                result = func(argument)
            if gives_radians(func):
                result = radians_to_degrees(result)
            token.type = TokenType.NUMBER
            token.number = result
            del tokens[i + 1]
            i += 1
        elif function.params == 2:
            first = _operand(tokens, i + 1).number
            second = _operand(tokens, i + 2).number
            token.type = TokenType.NUMBER
            token.number = function.func(first, second)
            del tokens[i + 1 : i + 3]
            i += 1
        else:
            i += 1