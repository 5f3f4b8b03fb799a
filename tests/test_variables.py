import pytest

from exprcalc.variables import (
    MAX_VARIABLES,
    TooManyVariablesError,
    VariableTable,
    parse_declaration,
    skip_declaration,
)


@pytest.mark.parametrize(
    "expr,name",
    [("x = 5", "x"), ("  total=3*4", "total"), ("abc   =  sin(30)", "abc")],
)
def test_parse_declaration_finds_name(expr, name):
    assert parse_declaration(expr) == name


@pytest.mark.parametrize("expr", ["  = 5", "5=3", "sin(30)", "x y = 3", "x1 = 2"])
def test_parse_declaration_rejects(expr):
    assert parse_declaration(expr) is None


def test_skip_declaration_returns_right_hand_side():
    assert skip_declaration("x = 5+2") == " 5+2"


def test_skip_declaration_without_equals_raises():
    with pytest.raises(ValueError):
        skip_declaration("5+2")


def test_add_and_find():
    table = VariableTable()
    table.add("x", 1.5)
    table.add("y", -2.0)
    assert table.find("x") == 0
    assert table.find("y") == 1
    assert table.value(table.find("y")) == -2.0
    assert table.find("z") is None


def test_update_keeps_index_and_size():
    table = VariableTable()
    table.add("x", 1.0)
    table.add("y", 2.0)
    table.add("x", 9.0)
    assert len(table) == 2
    assert table.find("x") == 0
    assert table.value(0) == 9.0


def test_value_out_of_range_raises():
    table = VariableTable()
    with pytest.raises(IndexError):
        table.value(0)


def test_capacity_limit():
    table = VariableTable(capacity=2)
    table.add("a", 1.0)
    table.add("b", 2.0)
    with pytest.raises(TooManyVariablesError):
        table.add("c", 3.0)
    table.add("a", 5.0)
    assert table.value(0) == 5.0
    assert "c" not in table


def test_default_capacity():
    table = VariableTable()
    for index in range(MAX_VARIABLES):
        table.add("v" * (index + 1), float(index))
    assert len(table) == MAX_VARIABLES
    with pytest.raises(TooManyVariablesError):
        table.add("w", 0.0)


def test_listing_format():
    table = VariableTable()
    table.add("x", 1.5)
    assert table.listing() == ["x = 1.500000"]


def test_iteration_preserves_order():
    table = VariableTable()
    table.add("b", 2.0)
    table.add("a", 1.0)
    assert [name for name, _ in table] == ["b", "a"]