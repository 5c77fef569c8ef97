# sheetgrid

`sheetgrid` is a pure-Python model of one worksheet in a SpreadsheetML
(`.xlsx`) workbook. It keeps cells, formulas, shared strings, row and
column settings, merged ranges, page layout and hyperlinks, and it writes
a sheet out as worksheet XML. It uses only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Cell addresses

```python
from sheetgrid.reference import CellReference, CellRange

ref = CellReference.from_string("B3")
ref.to_string()                      # "B3"
ref.to_string(True, True)            # "$B$3"

rng = CellRange.from_string("A1:C4")
rng.row_count(), rng.column_count()  # (4, 3)
rng.top_left().to_string()           # "A1"
```

Rows and columns count from 1. Text that cannot be parsed gives an
invalid reference or range (`is_valid()` returns `False`).

## Writing and reading cells

```python
from sheetgrid.worksheet import Worksheet

sheet = Worksheet("Sheet1")
sheet.write(1, 1, "Hello")
sheet.write(1, 2, 42)
sheet.write(2, 1, "=SUM(B1:B1)")   # strings that start with "=" become formulas
sheet.write_bool(2, 2, True)

sheet.read(1, 1)                   # "Hello"
sheet.read(2, 1)                   # "=SUM(B1:B1)"
sheet.dimension().to_string()      # "A1:B2"
```

`write` picks the cell kind from the Python type of the value: `None`,
`str`, `bool`, `int`/`float`, `datetime`, `date` and `time`. Strings that
look like URLs become hyperlinks (turn this off with
`strings_to_hyperlinks=False`), and with `strings_to_numbers=True` numeric
strings are stored as numbers. Any other type raises `TypeError`.

The sheet also has typed writers: `write_string`, `write_inline_string`,
`write_numeric`, `write_formula`, `write_blank`, `write_bool`,
`write_datetime`, `write_date`, `write_time` and `write_hyperlink`. A
position outside the sheet raises `ValueError`. Dates and times are stored
as serial numbers and read back as `datetime`, `date` or `time`; use
`sheetgrid.utility.datetime_to_number` and `datetime_from_number` to
convert in either direction (pass `is1904=True` for the 1904 date system,
or create the sheet with `date1904=True`).

Shared formulas written with `write_formula` and a `CellFormula` of type
`FormulaType.SHARED` mark every cell of their range; reading one of those
cells returns the formula shifted to that cell.

`get_full_cells()` returns every cell as a `CellLocation`, together with
the largest row and column in use.

## Rows, columns and merges

```python
from sheetgrid.reference import CellRange

sheet.set_column_width(1, 3, 20.0)
sheet.set_row_height(1, 1, 30.0)
sheet.set_row_hidden(5, 6, True)
sheet.group_rows(8, 10, False)
sheet.group_columns(4, 5, True)
sheet.merge_cells(CellRange.from_string("A10:C10"))
sheet.merged_cells()
sheet.unmerge_cells(CellRange.from_string("A10:C10"))
```

`column_width`, `is_column_hidden`, `row_height` and `is_row_hidden` read
the settings back; unset columns and rows give the sheet's defaults.
Merging fewer than two cells, unmerging a range that is not merged, or an
invalid row or column range raises `ValueError`.

## Saving sheet XML

```python
from sheetgrid.sheetsave import save_worksheet

xml_bytes, relationships = save_worksheet(sheet)
```

`relationships` lists `(type, target, target_mode)` for each external
hyperlink; the N-th entry is the one referred to as `rIdN` in the XML.

`sheetgrid.ziparchive.ZipReader` and `ZipWriter` read and write the files
of a zip package and can be used as context managers:

```python
from sheetgrid.ziparchive import ZipWriter

with ZipWriter("out.zip") as archive:
    archive.add_file("xl/worksheets/sheet1.xml", xml_bytes)
```

## What it does not do

- It does not read worksheet XML back into a `Worksheet`.
- It does not build a whole workbook: there is no workbook part, styles,
  themes, content types or relationship files, so writing a complete
  `.xlsx` that a spreadsheet program opens is left to the caller.
- Cell formats are not modelled beyond a style index number and a flag
  saying whether the number format shows a date or time.
- There are no charts, images, data validation or conditional formatting,
  and no command-line tool.