"""Arithmetic and trigonometric helpers used by the operator table."""

from __future__ import annotations

import math


def add(i: float, j: float) -> float:
    """Return the sum of two numbers."""
    return i + j


def sub(i: float, j: float) -> float:
    """Return the difference of two numbers."""
    return i - j


def mul(i: float, j: float) -> float:
    """Return the product of two numbers."""
    return i * j


def div(i: float, j: float) -> float:
    """Divide ``i`` by ``j``; division by zero yields ``0.0``."""
    if j == 0:
        return 0.0
    return i / j


def mod(i: float, j: float) -> float:
    """Floating-point remainder with the sign of ``i``; NaN where undefined."""
    try:
        return math.fmod(i, j)
    except ValueError:
        return math.nan


def _is_odd_integer(value: float) -> bool:
    value = float(value)
    return value.is_integer() and int(value) % 2 == 1


def power(i: float, j: float) -> float:
    """Raise ``i`` to the power ``j`` with IEEE results instead of errors."""
    try:
        return math.pow(i, j)
    except ValueError:
        if i == 0 and j < 0:
            if _is_odd_integer(j):
                return math.copysign(math.inf, i)
            return math.inf
        return math.nan
    except OverflowError:
        if i < 0 and _is_odd_integer(j):
            return -math.inf
        return math.inf


def fact(val: float) -> float:
    """Factorial, truncating the running product to an integer at each step."""
    result = 1
    while val > 1:
        result = int(result * val)
        val -= 1
    return float(result)


def _reciprocal(value: float) -> float:
    if value == 0:
        return math.copysign(math.inf, value)
    return 1 / value


def cot(x: float) -> float:
    """Cotangent of ``x`` in radians."""
    return _reciprocal(math.tan(x))


def sec(x: float) -> float:
    """Secant of ``x`` in radians."""
    return _reciprocal(math.cos(x))


def cosec(x: float) -> float:
    """Cosecant of ``x`` in radians."""
    return _reciprocal(math.sin(x))


def fib(n: float) -> float:
    """Return the ``n``-th Fibonacci number, counting fib(1) == fib(2) == 1."""
    if n == 1 or n == 2:
        return 1.0
    if not n > 2:
        raise ValueError(f"fib is undefined for {n!r}")
    previous, current = 1, 1
    for _ in range(math.ceil(n - 2)):
        previous, current = current, previous + current
    return float(current)