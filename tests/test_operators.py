import math

import pytest

from exprcalc.calculations import div, fact
from exprcalc.operators import (
    FUNCTIONS,
    MAX_NAME,
    find_function,
    get_class,
    get_double_operand_function,
    get_parameters,
    get_single_operand_function,
)


@pytest.mark.parametrize(
    "op,priority",
    [("+", 3), ("-", 3), ("*", 2), ("/", 2), ("%", 2), ("^", 2), ("sin", 1), ("min", 1)],
)
def test_priority_classes(op, priority):
    assert get_class(op) == priority


@pytest.mark.parametrize("op,params", [("+", 2), ("sqrt", 1), ("!", 1), ("hypt", 2)])
def test_parameter_counts(op, params):
    assert get_parameters(op) == params


def test_unknown_operator_raises():
    with pytest.raises(KeyError):
        get_class("nope")
    with pytest.raises(KeyError):
        get_parameters("nope")


def test_find_function_unknown_is_none():
    assert find_function("nope") is None


def test_find_function_returns_entry():
    entry = find_function("/")
    assert entry.op == "/"
    assert entry.func is div


def test_every_entry_is_found_by_its_own_name():
    for function in FUNCTIONS:
        found = find_function(function.op)
        assert found is function
        assert len(found.op) < MAX_NAME


def test_double_lookup_rejects_single_operand():
    assert get_double_operand_function("sin") is None
    assert get_double_operand_function("nope") is None


def test_single_lookup_rejects_double_operand():
    assert get_single_operand_function("+") is None
    assert get_single_operand_function("nope") is None


def test_factorial_entry():
    assert get_single_operand_function("!")(5) == fact(5)


def test_sqrt_of_negative_is_nan():
    result = get_single_operand_function("sqrt")(-1.0)
    assert str(result) == "nan"


def test_log_of_zero_is_negative_infinity():
    assert get_single_operand_function("log")(0.0) == -math.inf
    assert get_single_operand_function("ln")(0.0) == -math.inf


def test_log_is_base_ten_and_ln_is_natural():
    assert get_single_operand_function("log")(1000.0) == pytest.approx(math.log10(1000.0))
    assert get_single_operand_function("ln")(math.e) == pytest.approx(1.0)


def test_exp_overflow_is_infinite():
    assert get_single_operand_function("exp")(1000.0) == math.inf


def test_asin_out_of_domain_is_nan():
    result = get_single_operand_function("asin")(2.0)
    assert str(result) == "nan"


@pytest.mark.parametrize("x", [27.0, -8.0, 2.0, 0.001])
def test_cbrt_cubes_back(x):
    assert get_single_operand_function("cbrt")(x) ** 3 == pytest.approx(x)


def test_cbrt_keeps_sign():
    assert get_single_operand_function("cbrt")(-8.0) < 0


def test_floor_of_infinity():
    floor = get_single_operand_function("floor")
    assert floor(-math.inf) == -math.inf
    assert floor(2.7) == math.floor(2.7)


def test_min_max_ignore_nan():
    fmin = get_double_operand_function("min")
    fmax = get_double_operand_function("max")
    assert fmin(math.nan, 4.0) == 4.0
    assert fmax(3.0, math.nan) == 3.0
    assert fmin(3.0, 4.0) == 3.0
    assert fmax(3.0, 4.0) == 4.0


def test_hypt_matches_hypot():
    assert get_double_operand_function("hypt")(3.0, 4.0) == math.hypot(3.0, 4.0)