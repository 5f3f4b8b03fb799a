"""Small helpers shared by the tokenizer and the evaluator."""

from __future__ import annotations

import inspect
import math
from typing import Callable

from exprcalc.calculations import cosec, cot, sec

_PARENTHESES = frozenset("()[]{}")
_TAKING_RADIANS = (math.sin, math.cos, math.tan, cot, sec, cosec)
_GIVING_RADIANS = (math.asin, math.acos, math.atan)


def is_parenthesis(c: str) -> bool:
    """Return True if ``c`` is a round, square or curly bracket."""
    return c in _PARENTHESES and len(c) == 1


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * (math.pi / 180)


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * (180 / math.pi)


def _base(func: Callable) -> Callable:
    return inspect.unwrap(func)


def takes_radians(func: Callable) -> bool:
    """Return True if ``func`` is a trigonometric function of an angle."""
    base = _base(func)
    return any(base is candidate for candidate in _TAKING_RADIANS)


def gives_radians(func: Callable) -> bool:
    """Return True if ``func`` is an inverse trigonometric function."""
    base = _base(func)
    return any(base is candidate for candidate in _GIVING_RADIANS)


def get_word(expr: str) -> str:
    """Return the leading run of ASCII letters after any leading whitespace."""
    stripped = expr.lstrip()
    end = 0
    for char in stripped:
        if not (char.isascii() and char.isalpha()):
            break
        end += 1
    return stripped[:end]