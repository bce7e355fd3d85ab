"""A single optional number taken from a one-cell range."""

from __future__ import annotations

from .cells import CellMatrix, XlwError


class DoubleOrNothing:
    """A number that may be absent, read from a 1x1 cell matrix."""

    __slots__ = ("_empty", "_value")

    def __init__(self, cells: CellMatrix, identifier: str = "") -> None:
        if cells.columns != 1 or cells.rows != 1:
            raise XlwError(
                f"Multiple values given where one expected for DoubleOrNothing {identifier}"
            )
        cell = cells[0, 0]
        if not cell.is_empty() and not cell.is_a_number():
            raise XlwError(
                f"expected a double or nothing, got something else {identifier}"
            )
        self._empty = cell.is_empty()
        self._value = 0.0 if self._empty else cell.numeric_value()

    def __repr__(self) -> str:
        if self._empty:
            return "DoubleOrNothing(<empty>)"
        return f"DoubleOrNothing({self._value!r})"

    def is_empty(self) -> bool:
        """True when no number was given."""
        return self._empty

    def value_or_default(self, default: float) -> float:
        """The number given, or ``default`` when there was none."""
        return default if self._empty else self._value