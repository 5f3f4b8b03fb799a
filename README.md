# exprcalc

Pieces of a small infix calculator: arithmetic and scientific functions,
an operator table with precedence classes, token types, a depth-aware
evaluator and a table of named variables.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

- `exprcalc.calculations`: `add`, `sub`, `mul`, `div`, `mod`, `power`,
  `fact`, `cot`, `sec`, `cosec`, `fib`.
- `exprcalc.support`: `is_parenthesis`, `degrees_to_radians`,
  `radians_to_degrees`, `takes_radians`, `gives_radians`, `get_word`.
- `exprcalc.operators`: the `Function` table and lookups.
- `exprcalc.tokens`: `TokenType`, `Token`, `number_token`, `function_token`,
  `operator_token`.
- `exprcalc.evaluator`: `evaluate_expression` and its passes
  `evaluate_functions`, `evaluate_mul_div`, `evaluate_sum_sub`.
- `exprcalc.variables`: `parse_declaration`, `skip_declaration`,
  `VariableTable`, `TooManyVariablesError`.

## Operators and functions

`exprcalc.operators.FUNCTIONS` holds the operator table. Each entry is a
`Function` with its symbol (`op`), number of parameters (`params`),
precedence class (`priority`; 1 binds tightest, 3 loosest) and the callable
(`func`):

- class 3: `+`, `-`
- class 2: `*`, `/`, `%`, `^`
- class 1: `sqrt`, `cbrt`, `sin`, `cos`, `tan`, `cot`, `sec`, `cosec`,
  `floor`, `exp`, `log` (base 10), `ln`, `asin`, `atan`, `acos`, `!`, `abs`,
  `fib`, `min`, `max`, `hypt`

```python
from exprcalc.operators import get_class, get_parameters, get_double_operand_function

get_class("*")                            # 2
get_parameters("min")                     # 2
get_double_operand_function("^")(2, 10)   # 1024.0
```

`get_class` and `get_parameters` raise `KeyError` for an unknown symbol;
`find_function`, `get_double_operand_function` and
`get_single_operand_function` return `None` instead. Domain errors in the
table's functions give NaN or infinity rather than raising.

Trigonometric functions work in degrees when evaluated: the evaluator turns
arguments into radians before `sin`, `cos`, `tan`, `cot`, `sec` and `cosec`,
and turns the results of `asin`, `acos` and `atan` back into degrees.

Division by zero gives `0.0`. In an expression, `!` and `fib` accept whole
numbers only.

## Evaluating tokens

Expressions are evaluated from a list of tokens, each carrying the bracket
depth it was found at. Depths are worked from the deepest level outwards:
functions first, then `*`, `/`, `%`, `^`, then `+` and `-`. The list is
reduced in place.

```python
from exprcalc.tokens import number_token, operator_token, function_token
from exprcalc.evaluator import evaluate_expression, InvalidExpressionError

# 2 + 3 * 4
tokens = [
    number_token(2, 1),
    operator_token("+", 1),
    number_token(3, 1),
    operator_token("*", 1),
    number_token(4, 1),
]
evaluate_expression(tokens, 1)   # 14.0

# sin(30)
evaluate_expression([function_token("sin", 1), number_token(30, 2)], 2)   # 0.5, approximately
```

A malformed token sequence raises `InvalidExpressionError` (a `ValueError`).

## Variables

```python
from exprcalc.variables import VariableTable, parse_declaration, skip_declaration

line = "x = 2 * 3"
name = parse_declaration(line)    # "x"
body = skip_declaration(line)     # " 2 * 3"

table = VariableTable()
table.add(name, 6.0)
table.value(table.find("x"))      # 6.0
for entry in table.listing():
    print(entry)                  # x = 6.000000
```

The table holds at most 100 variables by default; adding one more raises
`TooManyVariablesError`. Adding an existing name updates its value.
`find` returns `None` for an unknown name, and `value` raises `IndexError`
for an index out of range. The table also supports `len`, `in` and iteration
over `(name, value)` pairs.

## What it does not do

The package does not turn expression text into tokens: token lists must be
built with `number_token`, `operator_token` and `function_token`. Variables
are stored in a `VariableTable` but are not looked up during evaluation.
There is no command-line program or interactive prompt.