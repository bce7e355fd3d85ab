"""Spreadsheet cell values and rectangular matrices of them."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Sequence, Union


class XlwError(Exception):
    """Raised when cell data is used in a way its type does not allow."""


class CellType(Enum):
    """The kind of value a cell holds."""

    STRING = "string"
    WSTRING = "wstring"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ERROR = "error"
    EMPTY = "empty"


Scalar = Union[None, str, float, int, bool]


def _narrow(text: str) -> str:
    """Narrow a wide string one character at a time, keeping the low byte."""
    return "".join(chr(ord(ch) & 0xFF) for ch in text)


class CellValue:
    """A single cell: a string, wide string, number, boolean, error or nothing."""

    __slots__ = ("_type", "_text", "_number", "_flag", "_code")

    def __init__(self, value: "Scalar | CellValue" = None, wide: bool = False) -> None:
        self._reset()
        self._assign(value, wide)

    @classmethod
    def error(cls, code: int) -> "CellValue":
        """Create an error cell carrying the given error code."""
        cell = cls()
        cell._type = CellType.ERROR
        cell._code = int(code)
        cell._number = float(code)
        return cell

    def _reset(self) -> None:
        self._type = CellType.EMPTY
        self._text = ""
        self._number = 0.0
        self._flag = False
        self._code = 0

    @property
    def type(self) -> CellType:
        return self._type

    def is_a_string(self) -> bool:
        return self._type is CellType.STRING

    def is_a_wstring(self) -> bool:
        return self._type is CellType.WSTRING

    def is_string(self) -> bool:
        return self._type in (CellType.STRING, CellType.WSTRING)

    def is_a_number(self) -> bool:
        return self._type is CellType.NUMBER

    def is_boolean(self) -> bool:
        return self._type is CellType.BOOLEAN

    def is_error(self) -> bool:
        return self._type is CellType.ERROR

    def is_empty(self) -> bool:
        return self._type is CellType.EMPTY

    def string_value(self) -> str:
        """The text of a string cell; wide text is narrowed character by character."""
        if self._type is CellType.STRING:
            return self._text
        if self._type is CellType.WSTRING:
            return _narrow(self._text)
        raise XlwError("non string cell asked to be a string")

    def wstring_value(self) -> str:
        """The text of a string cell as wide text."""
        if self.is_string():
            return self._text
        raise XlwError("non string cell asked to be a string")

    def numeric_value(self) -> float:
        if self._type is not CellType.NUMBER:
            raise XlwError("non number cell asked to be a number")
        return self._number

    def boolean_value(self) -> bool:
        if self._type is not CellType.BOOLEAN:
            raise XlwError("non boolean cell asked to be a bool")
        return self._flag

    def error_value(self) -> int:
        if self._type is not CellType.ERROR:
            raise XlwError("non error cell asked to be an error")
        return self._code

    def __float__(self) -> float:
        return self.numeric_value()

    def __int__(self) -> int:
        return int(self.numeric_value())

    def __str__(self) -> str:
        return self.string_value()

    def __repr__(self) -> str:
        if self._type is CellType.EMPTY:
            return "CellValue()"
        if self._type is CellType.ERROR:
            return f"CellValue.error({self._code})"
        if self._type is CellType.NUMBER:
            return f"CellValue({self._number!r})"
        if self._type is CellType.BOOLEAN:
            return f"CellValue({self._flag!r})"
        wide = ", wide=True" if self._type is CellType.WSTRING else ""
        return f"CellValue({self._text!r}{wide})"

    def _key(self) -> tuple:
        if self._type in (CellType.STRING, CellType.WSTRING):
            return (self._type, self._text)
        if self._type is CellType.NUMBER:
            return (self._type, self._number)
        if self._type is CellType.BOOLEAN:
            return (self._type, self._flag)
        if self._type is CellType.ERROR:
            return (self._type, self._code)
        return (self._type,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellValue):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def assign(self, value: "Scalar | CellValue") -> "CellValue":
        """Replace the content of this cell in place and return it."""
        return self._assign(value, False)

    def _assign(self, value: "Scalar | CellValue", wide: bool) -> "CellValue":
        if isinstance(value, CellValue):
            self._type = value._type
            self._text = value._text
            self._number = value._number
            self._flag = value._flag
            self._code = value._code
            return self
        self._reset()
        if value is None:
            return self
        if isinstance(value, bool):
            self._type = CellType.BOOLEAN
            self._flag = value
        elif isinstance(value, (int, float)):
            self._type = CellType.NUMBER
            self._number = float(value)
        elif isinstance(value, str):
            self._type = CellType.WSTRING if wide else CellType.STRING
            self._text = value
        else:
            raise TypeError(f"cannot store {type(value).__name__} in a cell")
        return self

    def clear(self) -> None:
        """Make the cell empty."""
        self._reset()

    def copy(self) -> "CellValue":
        return CellValue(self)


class CellMatrix:
    """A rectangular grid of cells, initially empty."""

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._columns = columns
        self._cells = [[CellValue() for _ in range(columns)] for _ in range(rows)]

    @classmethod
    def from_value(cls, value: "Scalar | CellValue") -> "CellMatrix":
        """A 1x1 matrix holding one value."""
        matrix = cls(1, 1)
        matrix._cells[0][0].assign(value)
        return matrix

    @classmethod
    def from_array(cls, values: Iterable["Scalar | CellValue"]) -> "CellMatrix":
        """A single-column matrix with one row per value."""
        items = list(values)
        matrix = cls(len(items), 1)
        for row, value in zip(matrix._cells, items):
            row[0].assign(value)
        return matrix

    @classmethod
    def from_matrix(cls, rows: Iterable[Sequence["Scalar | CellValue"]]) -> "CellMatrix":
        """A matrix built from a sequence of equally long rows."""
        data = [list(row) for row in rows]
        width = len(data[0]) if data else 0
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        matrix = cls(len(data), width)
        for target, source in zip(matrix._cells, data):
            for cell, value in zip(target, source):
                cell.assign(value)
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        try:
            i, j = key
        except (TypeError, ValueError):
            raise TypeError("cells are addressed as matrix[row, column]") from None
        if not (0 <= i < self._rows and 0 <= j < self._columns):
            raise IndexError(f"cell ({i}, {j}) outside {self._rows}x{self._columns} matrix")
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> CellValue:
        i, j = self._check(key)
        return self._cells[i][j]

    def __setitem__(self, key: tuple[int, int], value: "Scalar | CellValue") -> None:
        i, j = self._check(key)
        self._cells[i][j].assign(value)

    def __iter__(self) -> Iterator[tuple[CellValue, ...]]:
        for row in self._cells:
            yield tuple(row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellMatrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._columns == other._columns
            and self._cells == other._cells
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CellMatrix({self._rows}, {self._columns})"

    def push_bottom(self, other: "CellMatrix") -> None:
        """Append the rows of another matrix, widening to the larger column count."""
        width = max(self._columns, other._columns)
        appended = [[cell.copy() for cell in row] for row in other._cells]
        cells = self._cells + appended
        for row in cells:
            row.extend(CellValue() for _ in range(width - len(row)))
        self._cells = cells
        self._rows += other._rows
        self._columns = width

    def copy(self) -> "CellMatrix":
        """A deep copy whose cells are independent of this matrix."""
        result = CellMatrix()
        result._rows = self._rows
        result._columns = self._columns
        result._cells = [[cell.copy() for cell in row] for row in self._cells]
        return result


def merge_cell_matrices(top: CellMatrix, bottom: CellMatrix) -> CellMatrix:
    """A new matrix with the rows of ``bottom`` below those of ``top``."""
    merged = top.copy()
    merged.push_bottom(bottom)
    return merged