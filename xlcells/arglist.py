"""Named, typed arguments laid out in a block of spreadsheet cells.

The layout is: the structure name alone on the first row, then rows of
argument names, each with its value directly below. A value below a name may
be a number, a boolean or a string; the strings ``array``/``vector`` are
followed by a length and that many numbers, and ``matrix``/``cells``/``list``
are followed by a row and column count and the block of data.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .cells import CellMatrix, XlwError
from .strings import to_lower


class ArgumentType(Enum):
    """The kind of an argument held in an :class:`ArgumentList`."""

    STRING = "string"
    NUMBER = "number"
    VECTOR = "vector"
    MATRIX = "matrix"
    BOOLEAN = "boolean"
    LIST = "list"
    CELLS = "cells"


# The order in which argument kinds are written out by ``all_data``.
_OUTPUT_ORDER = (
    ArgumentType.NUMBER,
    ArgumentType.VECTOR,
    ArgumentType.MATRIX,
    ArgumentType.STRING,
    ArgumentType.BOOLEAN,
    ArgumentType.CELLS,
    ArgumentType.LIST,
)

_BLOCK_KINDS = {"list", "matrix", "cells"}
_ARRAY_KINDS = {"array", "vector"}


def _extract_cells(
    cells: CellMatrix, row: int, column: int, error_id: str, name: str
) -> tuple[CellMatrix, bool]:
    """Cut a sized block out of ``cells``, clearing what it consumed.

    Returns the block and whether any of its cells is not a number.
    """
    expected = f"{error_id} {name} rows and columns expected."
    if not cells[row, column].is_a_number():
        raise XlwError(expected)
    if cells.columns <= column + 1:
        raise XlwError(expected)
    if not cells[row, column + 1].is_a_number():
        raise XlwError(expected)

    number_rows = int(cells[row, column])
    number_columns = int(cells[row, column + 1])
    cells[row, column].clear()
    cells[row, column + 1].clear()

    if number_rows + row + 1 > cells.rows:
        raise XlwError(f"{error_id} {name} insufficient rows in structure")
    if number_columns + column > cells.columns:
        raise XlwError(f"{error_id} {name} insufficient columns in structure")

    result = CellMatrix(number_rows, number_columns)
    non_numeric = False
    for i in range(number_rows):
        for j in range(number_columns):
            source = cells[row + 1 + i, column + j]
            result[i, j] = source
            source.clear()
            if not result[i, j].is_a_number():
                non_numeric = True
    return result, non_numeric


def _block(name: str, kind: str, data: CellMatrix) -> CellMatrix:
    """The cell layout of a sized block argument."""
    block = CellMatrix(3 + data.rows, max(2, data.columns))
    block[0, 0] = name
    block[1, 0] = kind
    block[2, 0] = float(data.rows)
    block[2, 1] = float(data.columns)
    for i, row in enumerate(data):
        for j, cell in enumerate(row):
            block[i + 3, j] = cell
    return block


ArgumentValue = Union[str, float, int, bool, CellMatrix, "ArgumentList"]


class ArgumentList:
    """A named collection of typed arguments that can be read from and written to cells."""

    def __init__(self, name: str = "") -> None:
        self._structure_name = name
        self._order: list[tuple[str, ArgumentType]] = []
        self._names: dict[str, ArgumentType] = {}
        self._used: dict[str, bool] = {}
        self._values: dict[ArgumentType, dict[str, object]] = {
            kind: {} for kind in ArgumentType
        }

    def __repr__(self) -> str:
        return f"ArgumentList({self._structure_name!r}, {len(self._order)} arguments)"

    @classmethod
    def from_cells(cls, cells: CellMatrix, error_id: str = "") -> "ArgumentList":
        """Parse an argument list from its cell layout.

        Every non-empty cell must be consumed by the layout, otherwise an
        :class:`XlwError` is raised.
        """
        cells = cells.copy()
        rows, columns = cells.rows, cells.columns
        if rows == 0:
            raise XlwError(f"Argument List requires non empty cell matix {error_id}")

        head = cells[0, 0]
        if not head.is_string():
            raise XlwError(
                f"a structure name must be specified for argument list class {error_id}"
            )
        self = cls(to_lower(head.string_value()))
        head.clear()

        for j in range(1, columns):
            if not cells[0, j].is_empty():
                raise XlwError(
                    "An argument list should only have the structure name on the first line: "
                    f"{self._structure_name} {error_id}"
                )

        error_id += " " + self._structure_name

        for i in range(1, rows):
            for j in range(columns):
                if cells[i, j].is_error():
                    self._fail("Error Cell passed in ", i, j)

        row = 1
        while row < rows:
            rows_down = 1
            column = 0
            while column < columns:
                cell = cells[row, column]
                if cell.is_empty():
                    while column < columns:
                        if not cells[row, column].is_empty():
                            self._fail("data or value where unexpected.", row, column)
                        column += 1
                    continue

                if not cell.is_string():
                    self._fail("data  where name expected.", row, column)
                name = to_lower(cell.string_value())
                if name == "":
                    self._fail("empty name not permissible.", row, column)
                if rows == row + 1:
                    self._fail("No space where data expected below name", row, column)
                cell.clear()

                below = cells[row + 1, column]
                if below.is_empty():
                    self._fail("Data expected below name", row, column)

                if below.is_a_number():
                    self.add(name, below.numeric_value())
                    column += 1
                    below.clear()
                elif below.is_boolean():
                    self.add(name, below.boolean_value())
                    column += 1
                    below.clear()
                else:
                    text = to_lower(below.string_value())
                    if text in _BLOCK_KINDS:
                        extracted, non_numeric = _extract_cells(
                            cells, row + 2, column, error_id, name
                        )
                        if text == "list":
                            cls.from_cells(extracted, f"{error_id}:{name}")
                            self.add_list(name, extracted)
                        elif text == "cells":
                            self.add(name, extracted)
                        else:
                            if non_numeric:
                                raise XlwError(
                                    f"Non numerical value in matrix argument :{name} {error_id}"
                                )
                            self.add_matrix(name, extracted)
                        below.clear()
                        rows_down = max(rows_down, extracted.rows + 2)
                        column += extracted.columns
                    elif text in _ARRAY_KINDS:
                        below.clear()
                        if row + 2 >= rows:
                            raise XlwError(f"{error_id} data expected below array {name}")
                        size = int(cells[row + 2, column])
                        cells[row + 2, column].clear()
                        if row + 2 + size >= rows:
                            raise XlwError(
                                f"{error_id} more data expected below array {name}"
                            )
                        values = CellMatrix(size, 1)
                        for i in range(size):
                            source = cells[row + 3 + i, column]
                            if not source.is_a_number():
                                raise XlwError(
                                    f"Non numerical value in array argument :{name} {error_id}"
                                )
                            values[i, 0] = source
                            source.clear()
                        self.add_array(name, values)
                        rows_down = max(rows_down, size + 2)
                        column += 1
                    else:
                        self.add(name, text)
                        column += 1
                        below.clear()
            row += rows_down + 1

        for i, cell_row in enumerate(cells):
            for j, cell in enumerate(cell_row):
                if not cell.is_empty():
                    self._fail("extraneous data " + error_id, i, j)
        return self

    def _fail(self, message: str, row: int, column: int) -> None:
        raise XlwError(
            f"{self._structure_name} {message} row:{row}; column:{column}"
        )

    @property
    def structure_name(self) -> str:
        return self._structure_name

    @property
    def names_and_types(self) -> list[tuple[str, ArgumentType]]:
        """Argument names with their kinds, in the order they were added."""
        return list(self._order)

    def _register(self, name: str, kind: ArgumentType) -> None:
        if name in self._names:
            raise XlwError(f"Same argument name used twice {name}")
        self._names[name] = kind
        self._order.append((name, kind))
        self._used[name] = False

    def _add(self, name: str, value: object, kind: ArgumentType) -> None:
        self._register(name, kind)
        self._values[kind][name] = value

    def add(self, name: str, value: ArgumentValue) -> None:
        """Add an argument whose kind follows from the Python type of ``value``."""
        if isinstance(value, bool):
            self._add(name, value, ArgumentType.BOOLEAN)
        elif isinstance(value, (int, float)):
            self._add(name, float(value), ArgumentType.NUMBER)
        elif isinstance(value, str):
            self._add(name, value, ArgumentType.STRING)
        elif isinstance(value, CellMatrix):
            self._add(name, value.copy(), ArgumentType.CELLS)
        elif isinstance(value, ArgumentList):
            self._add(name, value.all_data(), ArgumentType.LIST)
        else:
            raise TypeError(f"cannot add an argument of type {type(value).__name__}")

    def add_list(self, name: str, cells: CellMatrix) -> None:
        """Add a nested argument list given in its cell layout."""
        self._add(name, cells.copy(), ArgumentType.LIST)

    def add_array(self, name: str, cells: CellMatrix) -> None:
        """Add a single-column array of numbers."""
        self._add(name, cells.copy(), ArgumentType.VECTOR)

    def add_matrix(self, name: str, cells: CellMatrix) -> None:
        """Add a matrix of numbers."""
        self._add(name, cells.copy(), ArgumentType.MATRIX)

    def _get(self, name: str, kind: ArgumentType) -> object:
        key = to_lower(name)
        store = self._values[kind]
        if key not in store:
            raise XlwError(
                f"{self._structure_name} unknown string argument asked for :{key}"
            )
        self._used[key] = True
        return store[key]

    def get_string(self, name: str) -> str:
        return self._get(name, ArgumentType.STRING)  # type: ignore[return-value]

    def get_ul(self, name: str) -> int:
        """A numeric argument truncated to an integer."""
        return int(self._get(name, ArgumentType.NUMBER))  # type: ignore[arg-type]

    def get_double(self, name: str) -> float:
        return self._get(name, ArgumentType.NUMBER)  # type: ignore[return-value]

    def get_bool(self, name: str) -> bool:
        return self._get(name, ArgumentType.BOOLEAN)  # type: ignore[return-value]

    def get_array(self, name: str) -> CellMatrix:
        return self._get(name, ArgumentType.VECTOR).copy()  # type: ignore[attr-defined]

    def get_matrix(self, name: str) -> CellMatrix:
        return self._get(name, ArgumentType.MATRIX).copy()  # type: ignore[attr-defined]

    def get_cells(self, name: str) -> CellMatrix:
        return self._get(name, ArgumentType.CELLS).copy()  # type: ignore[attr-defined]

    def get_argument_list(self, name: str) -> "ArgumentList":
        """A nested argument list, parsed from its stored cells."""
        cells = self._get(name, ArgumentType.LIST)
        return ArgumentList.from_cells(cells, name)  # type: ignore[arg-type]

    def is_present(self, name: str) -> bool:
        return to_lower(name) in self._names

    def get_if_present(self, name: str, kind: type) -> object:
        """The argument read as ``kind``, or None when it is absent.

        ``kind`` is one of int, float, bool, CellMatrix or ArgumentList.
        """
        getters = {
            int: self.get_ul,
            float: self.get_double,
            bool: self.get_bool,
            CellMatrix: self.get_cells,
            ArgumentList: self.get_argument_list,
        }
        try:
            getter = getters[kind]
        except (KeyError, TypeError):
            raise TypeError(f"cannot read an argument as {kind!r}") from None
        if not self.is_present(name):
            return None
        return getter(name)

    def check_all_used(self, error_id: str = "") -> None:
        """Raise if any argument has not been read."""
        unused = "".join(f"{name}, " for name in sorted(self._used) if not self._used[name])
        if unused:
            raise XlwError(
                f"Unused arguments in {error_id} {self._structure_name} {unused}"
            )

    def all_data(self) -> CellMatrix:
        """The cell layout of this list, readable again by :meth:`from_cells`."""
        result = CellMatrix.from_value(self._structure_name)
        for kind in _OUTPUT_ORDER:
            store = self._values[kind]
            for name in sorted(store):
                value = store[name]
                if kind is ArgumentType.VECTOR:
                    assert isinstance(value, CellMatrix)
                    block = CellMatrix(3 + value.rows, 1)
                    block[0, 0] = name
                    block[1, 0] = "array"
                    block[2, 0] = float(value.rows)
                    for i, row in enumerate(value):
                        block[i + 3, 0] = row[0]
                elif kind in (ArgumentType.MATRIX, ArgumentType.CELLS, ArgumentType.LIST):
                    assert isinstance(value, CellMatrix)
                    block = _block(name, kind.value, value)
                else:
                    block = CellMatrix.from_array([name, value])  # type: ignore[list-item]
                result.push_bottom(block)
        return result