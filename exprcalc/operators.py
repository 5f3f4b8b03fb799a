"""Table of the operators and functions an expression may use."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import Callable

from exprcalc.calculations import (
    add,
    cosec,
    cot,
    div,
    fact,
    fib,
    mod,
    mul,
    power,
    sec,
    sub,
)

MAX_NAME = 10


def _ieee(func: Callable[..., float]) -> Callable[..., float]:
    """Map Python math errors onto the IEEE values a C library would give."""

    @functools.wraps(func)
    def call(*args: float) -> float:
        try:
            return func(*args)
        except ValueError:
            return math.nan
        except (OverflowError, ZeroDivisionError):
            return math.inf

    return call


def _logarithm(func: Callable[[float], float]) -> Callable[[float], float]:
    @functools.wraps(func)
    def call(x: float) -> float:
        if x == 0:
            return -math.inf
        if x < 0 or math.isnan(x):
            return math.nan
        return func(x)

    return call


def _cbrt(x: float) -> float:
    if x == 0 or not math.isfinite(x):
        return x
    root = math.copysign(abs(x) ** (1 / 3), x)
    return root - (root * root * root - x) / (3 * root * root)


def _floor(x: float) -> float:
    if not math.isfinite(x):
        return x
    return float(math.floor(x))


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


@dataclass(frozen=True)
class Function:
    """An operator or named function.

    ``priority`` is 1 for named functions, 2 for multiplicative operators and
    3 for additive ones; lower binds tighter.
    """

    op: str
    params: int
    priority: int
    func: Callable[..., float]


FUNCTIONS: tuple[Function, ...] = (
    Function("+", 2, 3, add),
    Function("-", 2, 3, sub),
    Function("*", 2, 2, mul),
    Function("/", 2, 2, div),
    Function("%", 2, 2, mod),
    Function("^", 2, 2, power),
    Function("sqrt", 1, 1, _ieee(math.sqrt)),
    Function("cbrt", 1, 1, _cbrt),
    Function("sin", 1, 1, _ieee(math.sin)),
    Function("cos", 1, 1, _ieee(math.cos)),
    Function("tan", 1, 1, _ieee(math.tan)),
    Function("cot", 1, 1, _ieee(cot)),
    Function("sec", 1, 1, _ieee(sec)),
    Function("cosec", 1, 1, _ieee(cosec)),
    Function("floor", 1, 1, _floor),
    Function("exp", 1, 1, _ieee(math.exp)),
    Function("log", 1, 1, _logarithm(math.log10)),
    Function("ln", 1, 1, _logarithm(math.log)),
    Function("asin", 1, 1, _ieee(math.asin)),
    Function("atan", 1, 1, _ieee(math.atan)),
    Function("acos", 1, 1, _ieee(math.acos)),
    Function("!", 1, 1, _ieee(fact)),
    Function("abs", 1, 1, math.fabs),
    Function("fib", 1, 1, fib),
    Function("min", 2, 1, _fmin),
    Function("max", 2, 1, _fmax),
    Function("hypt", 2, 1, math.hypot),
)

_BY_NAME = {function.op: function for function in FUNCTIONS}


def find_function(op: str) -> Function | None:
    """Return the table entry for ``op``, or None if there is none."""
    return _BY_NAME.get(op)


def _require(op: str) -> Function:
    function = find_function(op)
    if function is None:
        raise KeyError(op)
    return function


def get_class(op: str) -> int:
    """Return the priority class of ``op``; raise KeyError if unknown."""
    return _require(op).priority


def get_parameters(op: str) -> int:
    """Return how many operands ``op`` takes; raise KeyError if unknown."""
    return _require(op).params


def get_double_operand_function(op: str) -> Callable[[float, float], float] | None:
    """Return the two-operand function for ``op``, or None."""
    function = find_function(op)
    if function is None or function.params != 2:
        return None
    return function.func


def get_single_operand_function(op: str) -> Callable[[float], float] | None:
    """Return the one-operand function for ``op``, or None."""
    function = find_function(op)
    if function is None or function.params != 1:
        return None
    return function.func