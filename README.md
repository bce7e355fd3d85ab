# xlcells

Building blocks for spreadsheet add-in functions. It provides typed cell
values, cell matrices that can grow, argument lists laid out in cells, and
helpers for length-prefixed spreadsheet strings. It has no dependencies outside
the standard library.

## Install

```
pip install xlcells
```

To run the tests:

```
pip install "xlcells[test]"
pytest
```

## Cells and matrices (`xlcells.cells`)

A `CellValue` holds exactly one of these, as given by its `CellType`:

- a string
- a wide string
- a number
- a boolean
- an error code
- nothing

Create an error cell with `CellValue.error(code)`. If you ask a cell for a
value of the wrong kind, it raises `XlwError`. This applies to
`numeric_value()`, `boolean_value()`, `string_value()`, `wstring_value()` and
`error_value()`. The same holds for `float()`, `int()` and `str()` on a cell.

When a wide string is read with `string_value()`, only the low byte of each
character is kept.

A `CellMatrix` is a rectangular grid of cells, addressed as `matrix[row, column]`:

- A new matrix starts with every cell empty.
- Assigning to `matrix[row, column]` replaces that cell's content.
- An index outside the matrix raises `IndexError`.
- Iterating over a matrix yields its rows as tuples.

```python
from xlcells.cells import CellMatrix, merge_cell_matrices

m = CellMatrix(2, 2)
m[0, 0] = "rate"
m[1, 0] = 0.05
assert m[1, 0].numeric_value() == 0.05

top = CellMatrix.from_array([1.0, 2.0])
both = merge_cell_matrices(top, CellMatrix.from_value("end"))
assert both.rows == 3 and both.columns == 1
```

Other ways to build and combine matrices:

- `CellMatrix.from_matrix(rows)` builds a matrix from rows of equal length.
- `push_bottom(other)` adds the rows of `other` to the bottom of the matrix. It widens the matrix with empty cells if needed.
- `copy()` returns an independent deep copy.

## Argument lists (`xlcells.arglist`)

An `ArgumentList` holds named, typed arguments. `ArgumentList.from_cells(cells,
error_id)` reads them from a block of cells laid out as follows:

- The first row holds the structure name and nothing else.
- Each argument name has its value directly below it.
- A value can be a number, a boolean or a string.
- The string `array` or `vector` is followed by a count, then that many numbers.
- The string `matrix`, `cells` or `list` is followed by a row count and a column count, then the block of data.

Names and string values read from cells are lower-cased.

Any cell that this layout does not account for raises `XlwError`. So do error
cells, non-numeric matrix or array entries, and repeated names.

`all_data()` writes the list back out in the same layout.

```python
from xlcells.arglist import ArgumentList

args = ArgumentList("option")
args.add("strike", 100.0)
args.add("call", True)

parsed = ArgumentList.from_cells(args.all_data(), "pricer")
assert parsed.get_double("strike") == 100.0
assert parsed.get_bool("call") is True
parsed.check_all_used("pricer")  # raises XlwError if anything went unread
```

### Adding arguments

`add(name, value)` picks the `ArgumentType` from the Python type of `value`:

| Python type of `value` | `ArgumentType` |
|---|---|
| `bool` | boolean |
| `int` or `float` | number |
| `str` | string |
| `CellMatrix` | cells |
| `ArgumentList` | list |

Use `add_array`, `add_matrix` and `add_list` to add those kinds from a `CellMatrix`.

### Reading arguments

The getters are `get_string`, `get_double`, `get_ul`, `get_bool`, `get_array`,
`get_matrix`, `get_cells` and `get_argument_list`.

- `get_ul` truncates the number to an integer.
- Each getter lower-cases the name it is given before looking it up.
- Each getter marks the argument as used.
- A missing argument raises `XlwError`.

Other helpers:

- `is_present(name)` tells you whether an argument exists.
- `get_if_present(name, kind)` returns the value, or `None` if the argument is absent. `kind` is one of `int`, `float`, `bool`, `CellMatrix` or `ArgumentList`.
- `names_and_types` lists the arguments in the order they were added.

## Optional numbers (`xlcells.doubleornothing`)

`DoubleOrNothing` accepts a 1x1 cell matrix whose cell is either a number or
empty. Any other input raises `XlwError`.

```python
from xlcells.cells import CellMatrix
from xlcells.doubleornothing import DoubleOrNothing

value = DoubleOrNothing(CellMatrix(1, 1), "tolerance")
assert value.is_empty()
assert value.value_or_default(1e-6) == 1e-6
```

## Strings (`xlcells.strings`)

**Byte strings.** Byte strings are `bytes` whose first byte is the length.
Latin-1 is used as the encoding.

- `string_to_pascal` encodes text this way and cuts it to 255 characters.
- `pascal_to_string` decodes it back.

**Wide strings.** Wide strings are lists of code units whose first unit is the
length.

- `string_to_wide_pascal` builds one and cuts it to 32767 characters.
- `wide_pascal_to_string` decodes it.

When a string is cut, a warning is logged through `logging`.

`pascal_copy` and `wide_pascal_copy` copy a string and drop anything past its
declared end. A string shorter than its declared length raises `ValueError`.

Other helpers:

- `to_upper` and `to_lower` change ASCII letters only.
- `get_environment_variable(name)` returns the value, or `""` if the variable is unset.
- `get_current_directory()` returns the current directory, or `""` if it cannot be read.

## Registries (`xlcells.registry`)

**`IncludeRegistry.instance(kind)`** returns the single registry for `kind`.

- `register(arg, include)` records the include that an argument type needs. The first registration wins, and empty includes are ignored.
- `use_arg(arg)` marks an argument type as used.
- `includes()` returns the set of includes for the used types.

**`MacroCache.instance(policy)`** returns the single macro cache for `policy`, for example `"open"` or `"close"`.

- `register(name, description, func)` wraps a callable as a `Macro` and stores it.
- `register_macro(macro)` stores a `Macro` you have already built.
- `execute_macros()` runs the stored macros in the order they were registered.

## What this package does not do

This package only models cell data and argument layouts in Python. It does not:

- connect to a running spreadsheet application;
- register functions or commands with one;
- generate interface code;
- produce help documentation.