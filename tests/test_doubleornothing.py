import pytest

from xlcells.cells import CellMatrix, XlwError
from xlcells.doubleornothing import DoubleOrNothing


def test_empty_cell_gives_default():
    value = DoubleOrNothing(CellMatrix(1, 1), "arg")
    assert value.is_empty() is True
    assert value.value_or_default(3.5) == 3.5


def test_number_cell_ignores_default():
    value = DoubleOrNothing(CellMatrix.from_value(2.5), "arg")
    assert value.is_empty() is False
    assert value.value_or_default(9.0) == 2.5


def test_integer_number_is_accepted():
    value = DoubleOrNothing(CellMatrix.from_value(4), "arg")
    assert value.value_or_default(0.0) == 4.0


@pytest.mark.parametrize("rows,columns", [(2, 1), (1, 2), (0, 0), (2, 2)])
def test_wrong_shape_raises(rows, columns):
    with pytest.raises(XlwError, match="Multiple values given where one expected"):
        DoubleOrNothing(CellMatrix(rows, columns), "strike")


def test_wrong_shape_message_names_identifier():
    with pytest.raises(XlwError, match="strike"):
        DoubleOrNothing(CellMatrix(2, 1), "strike")


@pytest.mark.parametrize("content", ["text", True])
def test_non_number_raises(content):
    with pytest.raises(XlwError, match="expected a double or nothing"):
        DoubleOrNothing(CellMatrix.from_value(content), "arg")