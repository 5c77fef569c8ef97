from datetime import date, datetime, time

import pytest

from sheetgrid.cell import CellType
from sheetgrid.formula import CellFormula, FormulaType
from sheetgrid.reference import COLUMN_MAX, ROW_MAX, CellRange
from sheetgrid.sheetview import LinkType
from sheetgrid.sheettypes import SheetType
from sheetgrid.worksheet import Worksheet


@pytest.fixture
def sheet():
    return Worksheet("Data")


def test_write_and_read_string(sheet):
    sheet.write(1, 1, "hello")
    assert sheet.read(1, 1) == "hello"
    assert sheet.cell_at(1, 1).cell_type is CellType.SHARED_STRING
    assert "hello" in sheet.shared_strings


def test_read_missing_cell_is_none(sheet):
    assert sheet.read(3, 3) is None
    assert sheet.cell_at(3, 3) is None


@pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (ROW_MAX + 1, 1), (1, COLUMN_MAX + 1)])
def test_out_of_range_write_raises(sheet, row, col):
    with pytest.raises(ValueError):
        sheet.write(row, col, 1)


def test_numbers_and_bools(sheet):
    sheet.write(1, 1, 7)
    sheet.write(1, 2, 2.5)
    sheet.write(1, 3, True)
    assert sheet.read(1, 1) == 7.0
    assert sheet.read(1, 2) == 2.5
    assert sheet.read(1, 3) is True
    assert sheet.cell_at(1, 3).cell_type is CellType.BOOLEAN


def test_blank_cell(sheet):
    sheet.write(2, 2, None)
    assert sheet.cell_at(2, 2) is not None
    assert sheet.read(2, 2) is None


def test_unsupported_type_raises(sheet):
    with pytest.raises(TypeError):
        sheet.write(1, 1, object())


def test_formula_string(sheet):
    sheet.write(1, 1, "=SUM(A2:A3)")
    assert sheet.read(1, 1) == "=SUM(A2:A3)"
    assert sheet.cell_at(1, 1).formula.calculate is True


def test_shared_formula_translated(sheet):
    formula = CellFormula("B1*2", FormulaType.SHARED, CellRange(1, 1, 3, 1))
    sheet.write_formula(1, 1, formula)
    assert sheet.read(1, 1) == "=B1*2"
    assert sheet.read(2, 1) == "=B2*2"
    assert sheet.cell_at(3, 1).formula.shared_index == sheet.cell_at(1, 1).formula.shared_index


def test_shared_formula_indexes_are_distinct(sheet):
    sheet.write_formula(1, 1, CellFormula("C1", FormulaType.SHARED, CellRange(1, 1, 1, 2)))
    sheet.write_formula(5, 1, CellFormula("C5", FormulaType.SHARED, CellRange(5, 1, 5, 2)))
    assert sorted(sheet.shared_formulas) == [0, 1]


def test_strings_to_numbers():
    ws = Worksheet(strings_to_numbers=True)
    ws.write(1, 1, "3.5")
    ws.write(1, 2, "abc")
    assert ws.read(1, 1) == 3.5
    assert ws.read(1, 2) == "abc"


def test_hyperlink_from_string(sheet):
    sheet.write(1, 1, "https://example.com/page#part")
    assert sheet.read(1, 1) == "https://example.com/page#part"
    link = sheet.url_table[1][1]
    assert link.link_type is LinkType.EXTERNAL
    assert link.target == "https://example.com/page"
    assert link.location == "part"


def test_mailto_display_stripped(sheet):
    sheet.write_hyperlink(2, 1, "mailto:someone@example.com", tip="mail")
    assert sheet.read(2, 1) == "someone@example.com"
    assert sheet.url_table[2][1].tooltip == "mail"


def test_hyperlinks_disabled_keeps_string():
    ws = Worksheet(strings_to_hyperlinks=False)
    ws.write(1, 1, "https://example.com")
    assert ws.url_table == {}
    assert ws.read(1, 1) == "https://example.com"


def test_date_round_trips(sheet):
    sheet.write(1, 1, date(2021, 3, 4))
    sheet.write(1, 2, datetime(2021, 3, 4, 6, 0))
    sheet.write(1, 3, time(12, 30))
    assert sheet.read(1, 1) == date(2021, 3, 4)
    assert sheet.read(1, 2) == datetime(2021, 3, 4, 6, 0)
    assert sheet.read(1, 3) == time(12, 30)


def test_date_round_trip_1904():
    ws = Worksheet(date1904=True)
    ws.write(1, 1, date(2000, 1, 1))
    assert ws.read(1, 1) == date(2000, 1, 1)


def test_inline_string(sheet):
    sheet.write_inline_string(1, 1, "inline")
    assert sheet.read(1, 1) == "inline"
    assert sheet.shared_strings.is_empty()


def test_dimension_tracks_writes(sheet):
    sheet.write(2, 3, 1)
    sheet.write(5, 1, 1)
    assert sheet.dimension() == CellRange(2, 1, 5, 3)


def test_validate_dimension_from_cells(sheet):
    sheet.write(2, 2, 1)
    sheet.write(4, 6, 1)
    sheet.set_dimension(CellRange())
    sheet.validate_dimension()
    assert sheet.dimension() == CellRange(2, 2, 4, 6)


def test_merge_and_unmerge(sheet):
    sheet.write(1, 1, "top")
    sheet.write(2, 2, "gone")
    rng = CellRange(1, 1, 2, 2)
    sheet.merge_cells(rng)
    assert sheet.merged_cells() == [rng]
    assert sheet.read(1, 1) == "top"
    assert sheet.read(2, 2) is None
    sheet.unmerge_cells(rng)
    assert sheet.merged_cells() == []
    with pytest.raises(ValueError):
        sheet.unmerge_cells(rng)


def test_merge_single_cell_raises(sheet):
    with pytest.raises(ValueError):
        sheet.merge_cells(CellRange(1, 1, 1, 1))


def test_merged_cells_empty_for_chartsheet():
    ws = Worksheet(sheet_type=SheetType.CHARTSHEET)
    ws.merges.append(CellRange(1, 1, 2, 2))
    assert ws.merged_cells() == []


def test_column_width_and_hidden(sheet):
    default = sheet.sheet_format_props.default_col_width
    sheet.set_column_width(2, 4, 20.0)
    sheet.set_column_hidden(3, 3, True)
    assert sheet.column_width(3) == 20.0
    assert sheet.column_width(1) == default
    assert sheet.is_column_hidden(3) is True
    assert sheet.is_column_hidden(2) is False


def test_invalid_column_range_raises(sheet):
    with pytest.raises(ValueError):
        sheet.set_column_width(5, 2, 10.0)
    with pytest.raises(ValueError):
        sheet.set_column_hidden(0, 2, True)


def test_row_height_and_hidden(sheet):
    assert sheet.row_height(4) == sheet.sheet_format_props.default_row_height
    sheet.set_row_height(2, 3, 30.0)
    sheet.set_row_hidden(3, 3, True)
    assert sheet.row_height(2) == 30.0
    assert sheet.rows_info[2].custom_height is True
    assert sheet.is_row_hidden(3) is True
    assert sheet.is_row_hidden(2) is False


def test_invalid_row_range_raises(sheet):
    with pytest.raises(ValueError):
        sheet.set_row_height(0, 0, 10.0)


def test_group_rows_collapsed(sheet):
    sheet.group_rows(2, 4)
    assert all(sheet.rows_info[r].hidden for r in (2, 3, 4))
    assert all(sheet.rows_info[r].outline_level == 1 for r in (2, 3, 4))
    assert sheet.rows_info[5].collapsed is True


def test_group_columns_collapsed(sheet):
    sheet.group_columns(2, 3)
    assert sheet.columns.info_for(2).hidden is True
    assert sheet.columns.info_for(3).outline_level == 1
    assert sheet.columns.info_for(4).collapsed is True


def test_get_full_cells(sheet):
    sheet.write(1, 2, "a")
    sheet.write(3, 1, "b")
    locations, max_row, max_col = sheet.get_full_cells()
    assert [(loc.row, loc.col) for loc in locations] == [(1, 2), (3, 1)]
    assert (max_row, max_col) == (3, 2)
    assert locations[1].cell.value == "b"


def test_get_full_cells_unsupported_type():
    ws = Worksheet(sheet_type=SheetType.MACROSHEET)
    with pytest.raises(ValueError):
        ws.get_full_cells()


def test_set_start_page(sheet):
    sheet.set_start_page(4)
    assert sheet.page_setup.first_page_number == "4"


def test_overwrite_keeps_date_style(sheet):
    sheet.write(1, 1, date(2020, 5, 6))
    sheet.write_numeric(1, 1, sheet.cell_at(1, 1).value)
    assert sheet.read(1, 1) == date(2020, 5, 6)