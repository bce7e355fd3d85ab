import pytest

from xlcells.arglist import ArgumentList, ArgumentType
from xlcells.cells import CellMatrix, CellValue, XlwError


def _parse(rows, error_id="test"):
    return ArgumentList.from_cells(CellMatrix.from_matrix(rows), error_id)


def test_scalar_arguments_are_parsed():
    args = _parse([["Trade", None], ["Notional", "Flag"], [100.0, True]])
    assert args.structure_name == "trade"
    assert args.get_double("notional") == 100.0
    assert args.get_bool("FLAG") is True
    assert args.names_and_types == [
        ("notional", ArgumentType.NUMBER),
        ("flag", ArgumentType.BOOLEAN),
    ]


def test_string_argument_is_lowered():
    args = _parse([["s"], ["Kind"], ["Call"]])
    assert args.get_string("kind") == "call"


def test_array_argument():
    args = _parse([["s"], ["strikes"], ["array"], [2], [1.0], [2.0]])
    assert args.get_array("strikes") == CellMatrix.from_array([1.0, 2.0])
    assert args.names_and_types == [("strikes", ArgumentType.VECTOR)]


def test_matrix_argument():
    args = _parse(
        [["s", None], ["m", None], ["matrix", None], [2, 2], [1, 2], [3, 4]]
    )
    assert args.get_matrix("m") == CellMatrix.from_matrix([[1, 2], [3, 4]])


def test_cells_argument_keeps_strings():
    args = _parse(
        [["s", None], ["c", None], ["cells", None], [1, 2], ["x", 5]]
    )
    assert args.get_cells("c") == CellMatrix.from_matrix([["x", 5]])


def test_matrix_with_text_raises():
    with pytest.raises(XlwError, match="Non numerical value in matrix argument"):
        _parse([["s", None], ["m", None], ["matrix", None], [1, 2], ["x", 5]])


def test_array_with_text_raises():
    with pytest.raises(XlwError, match="Non numerical value in array argument"):
        _parse([["s"], ["a"], ["array"], [1], ["x"]])


def test_array_too_short_raises():
    with pytest.raises(XlwError, match="more data expected below array"):
        _parse([["s"], ["a"], ["array"], [3], [1.0]])


def test_empty_matrix_raises():
    with pytest.raises(XlwError, match="non empty cell matix"):
        ArgumentList.from_cells(CellMatrix(), "id")


def test_missing_structure_name_raises():
    with pytest.raises(XlwError, match="a structure name must be specified"):
        _parse([[1.0]])


def test_data_on_first_line_raises():
    with pytest.raises(XlwError, match="only have the structure name on the first line"):
        _parse([["s", 2.0], ["a", None], [1.0, None]])


def test_error_cell_raises():
    cells = CellMatrix.from_matrix([["s"], ["a"], [None]])
    cells[2, 0] = CellValue.error(7)
    with pytest.raises(XlwError, match="Error Cell passed in"):
        ArgumentList.from_cells(cells, "id")


def test_extraneous_data_raises():
    with pytest.raises(XlwError, match="extraneous data"):
        _parse([["s", None], ["a", None], [1.0, 5.0]])


def test_duplicate_name_raises():
    with pytest.raises(XlwError, match="Same argument name used twice"):
        _parse([["s", None], ["a", "A"], [1.0, 2.0]])


def test_name_without_value_raises():
    with pytest.raises(XlwError, match="No space where data expected below name"):
        _parse([["s"], ["a"]])


def test_number_where_name_expected_raises():
    with pytest.raises(XlwError, match="where name expected"):
        _parse([["s"], [1.0], [2.0]])


def test_unknown_argument_raises():
    args = _parse([["s"], ["a"], [1.0]])
    with pytest.raises(XlwError, match="unknown string argument asked for"):
        args.get_double("b")


def test_check_all_used():
    args = _parse([["s", None], ["a", "b"], [1.0, 2.0]])
    assert args.get_double("a") == 1.0
    with pytest.raises(XlwError, match="Unused arguments in ctx s b, "):
        args.check_all_used("ctx")
    assert args.get_double("b") == 2.0
    args.check_all_used("ctx")
    assert args.is_present("b")


def test_is_present_ignores_case():
    args = _parse([["s"], ["alpha"], [1.0]])
    assert args.is_present("ALPHA")
    assert not args.is_present("beta")


def test_get_if_present():
    args = _parse([["s"], ["n"], [7.9]])
    assert args.get_if_present("missing", float) is None
    assert args.get_if_present("n", float) == 7.9
    assert args.get_if_present("n", int) == 7


def test_get_if_present_rejects_unknown_kind():
    args = ArgumentList("s")
    with pytest.raises(TypeError):
        args.get_if_present("n", list)


def test_get_ul_truncates():
    args = ArgumentList("s")
    args.add("n", 7.9)
    assert args.get_ul("n") == 7


def test_all_data_layout_of_one_number():
    args = ArgumentList("s")
    args.add("a", 1.0)
    assert args.all_data() == CellMatrix.from_matrix([["s"], ["a"], [1.0]])


def test_all_data_sorts_names():
    args = ArgumentList("s")
    args.add("b", 2.0)
    args.add("a", 1.0)
    assert args.all_data() == CellMatrix.from_matrix(
        [["s"], ["a"], [1.0], ["b"], [2.0]]
    )


def test_round_trip_through_cells():
    original = ArgumentList("deal")
    original.add("rate", 0.05)
    original.add("ccy", "eur")
    original.add("live", False)
    original.add_array("times", CellMatrix.from_array([1.0, 2.0, 3.0]))
    original.add_matrix("grid", CellMatrix.from_matrix([[1.0, 2.0], [3.0, 4.0]]))
    original.add("raw", CellMatrix.from_matrix([["x"]]))
    inner = ArgumentList("inner")
    inner.add("x", 1.5)
    original.add("child", inner)

    parsed = ArgumentList.from_cells(original.all_data(), "rt")
    assert parsed.structure_name == "deal"
    assert parsed.get_double("rate") == 0.05
    assert parsed.get_string("ccy") == "eur"
    assert parsed.get_bool("live") is False
    assert parsed.get_array("times") == CellMatrix.from_array([1.0, 2.0, 3.0])
    assert parsed.get_matrix("grid") == CellMatrix.from_matrix([[1.0, 2.0], [3.0, 4.0]])
    assert parsed.get_cells("raw") == CellMatrix.from_matrix([["x"]])
    child = parsed.get_argument_list("child")
    assert child.structure_name == "inner"
    assert child.get_double("x") == 1.5
    assert sorted(parsed.names_and_types) == sorted(original.names_and_types)


def test_from_cells_leaves_input_untouched():
    cells = CellMatrix.from_matrix([["s"], ["a"], [1.0]])
    before = cells.copy()
    ArgumentList.from_cells(cells, "id")
    assert cells == before


def test_add_rejects_unsupported_type():
    args = ArgumentList("s")
    with pytest.raises(TypeError):
        args.add("a", [1, 2])


def test_add_duplicate_raises():
    args = ArgumentList("s")
    args.add("a", 1.0)
    with pytest.raises(XlwError, match="Same argument name used twice a"):
        args.add("a", "text")
    assert args.names_and_types == [("a", ArgumentType.NUMBER)]