"""Variable declarations and the table of stored variables."""

from __future__ import annotations

from typing import Iterator

MAX_VARIABLES = 100


class TooManyVariablesError(Exception):
    """Raised when a new variable would exceed the table's capacity."""


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def parse_declaration(expr: str) -> str | None:
    """Return the variable name if ``expr`` has the form ``name = ...``."""
    rest = expr.lstrip()
    if rest.startswith("="):
        return None
    end = 0
    for char in rest:
        if not _is_letter(char):
            break
        end += 1
    name = rest[:end]
    if rest[end:].lstrip().startswith("="):
        return name
    return None


def skip_declaration(expr: str) -> str:
    """Return the part of ``expr`` after its first ``=``."""
    _, sep, rest = expr.partition("=")
    if not sep:
        raise ValueError(f"no '=' in {expr!r}")
    return rest


class VariableTable:
    """Named numeric variables, kept in the order they were first defined."""

    def __init__(self, capacity: int = MAX_VARIABLES) -> None:
        self.capacity = capacity
        self._values: dict[str, float] = {}

    def add(self, name: str, value: float) -> None:
        """Define ``name`` or update its value if it already exists."""
        if name not in self._values and len(self._values) >= self.capacity:
            raise TooManyVariablesError(
                f"cannot hold more than {self.capacity} variables"
            )
        self._values[name] = value

    def find(self, name: str) -> int | None:
        """Return the index of ``name``, or None if it is not defined."""
        for index, existing in enumerate(self._values):
            if existing == name:
                return index
        return None

    def value(self, index: int) -> float:
        """Return the value of the variable at ``index``."""
        if not 0 <= index < len(self._values):
            raise IndexError(index)
        return list(self._values.values())[index]

    def listing(self) -> list[str]:
        """Return one ``name = value`` line per variable."""
        return [f"{name} = {value:f}" for name, value in self._values.items()]

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(self._values.items())