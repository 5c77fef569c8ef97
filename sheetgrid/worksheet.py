"""A worksheet: a grid of cells with layout, merges and hyperlinks."""

from __future__ import annotations

import dataclasses
import re
from datetime import date, datetime, time
from typing import Any
from urllib.parse import urldefrag

from sheetgrid.cell import Cell, CellType
from sheetgrid.formula import CellFormula, FormulaType
from sheetgrid.reference import (
    COLUMN_MAX,
    ROW_MAX,
    STRING_MAX,
    CellLocation,
    CellRange,
    CellReference,
)
from sheetgrid.rowcol import ColumnInfo, ColumnTable, RowInfo, SheetFormatProps
from sheetgrid.sharedstrings import SharedStrings
from sheetgrid.sheettypes import AbstractSheet, SheetState, SheetType
from sheetgrid.sheetview import (
    HeaderFooter,
    HyperlinkData,
    LinkType,
    PageMargins,
    PageSetup,
    SheetView,
)
from sheetgrid.utility import (
    convert_shared_formula,
    datetime_to_number,
    time_to_number,
)

_URL_PATTERN = re.compile(r"^([fh]tt?ps?://)|(mailto:)|(file://)")
_NUMBER_PATTERN = re.compile(
    r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$|^[+-]?(inf|nan)$", re.IGNORECASE
)


class Worksheet(AbstractSheet):
    """One worksheet of a workbook; rows and columns are one-based."""

    def __init__(
        self,
        name: str = "Sheet1",
        sheet_id: int = 1,
        shared_strings: SharedStrings | None = None,
        *,
        sheet_type: SheetType = SheetType.WORKSHEET,
        sheet_state: SheetState = SheetState.VISIBLE,
        date1904: bool = False,
        strings_to_numbers: bool = False,
        strings_to_hyperlinks: bool = True,
        file_path: str = "",
    ) -> None:
        super().__init__(name, sheet_id, sheet_type, sheet_state, file_path)
        self.shared_strings = shared_strings if shared_strings is not None else SharedStrings()
        self.date1904 = date1904
        self.strings_to_numbers = strings_to_numbers
        self.strings_to_hyperlinks = strings_to_hyperlinks

        self.cells: dict[int, dict[int, Cell]] = {}
        self._dimension = CellRange()
        self.merges: list[CellRange] = []
        self.rows_info: dict[int, RowInfo] = {}
        self.columns = ColumnTable()
        self.sheet_format_props = SheetFormatProps()
        self.url_table: dict[int, dict[int, HyperlinkData]] = {}
        self.shared_formulas: dict[int, CellFormula] = {}

        self.view = SheetView()
        self.page_margins = PageMargins()
        self.page_setup = PageSetup()
        self.header_footer = HeaderFooter()

        self.default_row_height = 15.0
        self.default_row_zeroed = False
        self.outline_row_level = 0
        self.outline_col_level = 0

    # -- bookkeeping ------------------------------------------------------

    def _check_dimensions(
        self, row: int, column: int, ignore_row: bool = False, ignore_col: bool = False
    ) -> bool:
        """Validate a position and widen the used range; False when out of bounds."""
        if not (1 <= row <= ROW_MAX and 1 <= column <= COLUMN_MAX):
            return False
        dim = self._dimension
        if not ignore_row:
            if row < dim.first_row or dim.first_row == -1:
                dim.first_row = row
            if row > dim.last_row:
                dim.last_row = row
        if not ignore_col:
            if column < dim.first_column or dim.first_column == -1:
                dim.first_column = column
            if column > dim.last_column:
                dim.last_column = column
        return True

    def _require(self, row: int, column: int) -> None:
        if not self._check_dimensions(row, column):
            raise ValueError(f"cell position ({row}, {column}) is out of range")

    def _existing_style(self, row: int, column: int) -> tuple[bool, int]:
        cell = self.cell_at(row, column)
        if cell is None:
            return False, -1
        return cell.datetime_format, cell.style_number

    def _put(
        self,
        row: int,
        column: int,
        value: Any,
        cell_type: CellType,
        datetime_format: bool | None = None,
    ) -> Cell:
        inherited, style = self._existing_style(row, column)
        cell = Cell(
            value=value,
            cell_type=cell_type,
            datetime_format=inherited if datetime_format is None else datetime_format,
            style_number=style,
            parent=self,
        )
        self.cells.setdefault(row, {})[column] = cell
        return cell

    # -- writing ----------------------------------------------------------

    def write(self, row: int, column: int, value: Any) -> None:
        """Write ``value`` choosing the cell kind from its Python type."""
        self._require(row, column)
        if value is None:
            self.write_blank(row, column)
        elif isinstance(value, str):
            if value.startswith("="):
                self.write_formula(row, column, CellFormula(value))
            elif self.strings_to_hyperlinks and _URL_PATTERN.search(value):
                self.write_hyperlink(row, column, value)
            elif self.strings_to_numbers and _NUMBER_PATTERN.match(value.strip()):
                self.write_numeric(row, column, float(value.strip()))
            else:
                self.write_string(row, column, value)
        elif isinstance(value, bool):
            self.write_bool(row, column, value)
        elif isinstance(value, (int, float)):
            self.write_numeric(row, column, float(value))
        elif isinstance(value, datetime):
            self.write_datetime(row, column, value)
        elif isinstance(value, date):
            self.write_date(row, column, value)
        elif isinstance(value, time):
            self.write_time(row, column, value)
        else:
            raise TypeError(f"cannot write a value of type {type(value).__name__}")

    def write_string(self, row: int, column: int, value: str) -> None:
        self._require(row, column)
        self.shared_strings.add(value)
        self._put(row, column, value, CellType.SHARED_STRING)

    def write_inline_string(self, row: int, column: int, value: str) -> None:
        self._require(row, column)
        self._put(row, column, value, CellType.INLINE_STRING)

    def write_numeric(self, row: int, column: int, value: float) -> None:
        self._require(row, column)
        self._put(row, column, float(value), CellType.NUMBER)

    def write_formula(
        self, row: int, column: int, formula: CellFormula | str, result: float = 0
    ) -> None:
        """Write a formula; a shared formula also marks the other cells of its range."""
        self._require(row, column)
        if isinstance(formula, str):
            formula = CellFormula(formula)
        formula = dataclasses.replace(formula, calculate=True)
        if formula.formula_type is FormulaType.SHARED:
            si = 0
            while si in self.shared_formulas:
                si += 1
            formula.shared_index = si
            self.shared_formulas[si] = formula

        cell = self._put(row, column, result, CellType.NUMBER)
        cell.formula = formula

        if formula.formula_type is not FormulaType.SHARED:
            return
        ref = formula.reference
        for r in range(ref.first_row, ref.last_row + 1):
            for c in range(ref.first_column, ref.last_column + 1):
                if (r, c) == (row, column):
                    continue
                follower = CellFormula(
                    "", FormulaType.SHARED, shared_index=formula.shared_index
                )
                existing = self.cell_at(r, c)
                if existing is not None:
                    existing.formula = follower
                else:
                    new_cell = Cell(
                        value=result,
                        cell_type=CellType.NUMBER,
                        datetime_format=cell.datetime_format,
                        style_number=cell.style_number,
                        formula=follower,
                        parent=self,
                    )
                    self.cells.setdefault(r, {})[c] = new_cell

    def write_blank(self, row: int, column: int) -> None:
        self._require(row, column)
        self._put(row, column, None, CellType.NUMBER)

    def write_bool(self, row: int, column: int, value: bool) -> None:
        self._require(row, column)
        self._put(row, column, bool(value), CellType.BOOLEAN)

    def write_datetime(self, row: int, column: int, dt: datetime) -> None:
        self._require(row, column)
        number = datetime_to_number(dt, self.date1904)
        self._put(row, column, number, CellType.NUMBER, datetime_format=True)

    def write_date(self, row: int, column: int, d: date) -> None:
        self._require(row, column)
        number = datetime_to_number(datetime.combine(d, time()), self.date1904)
        self._put(row, column, number, CellType.NUMBER, datetime_format=True)

    def write_time(self, row: int, column: int, t: time) -> None:
        self._require(row, column)
        self._put(row, column, time_to_number(t), CellType.NUMBER, datetime_format=True)

    def write_hyperlink(
        self, row: int, column: int, url: str, display: str = "", tip: str = ""
    ) -> None:
        """Write a link as a shared string and record its target."""
        self._require(row, column)
        display_string = display or url
        if display_string.startswith("mailto:"):
            display_string = display_string.replace("mailto:", "")
        display_string = display_string[:STRING_MAX]

        target, location = urldefrag(url)
        if not location:
            target = url

        self.shared_strings.add(display_string)
        self._put(row, column, display_string, CellType.SHARED_STRING)
        self.url_table.setdefault(row, {})[column] = HyperlinkData(
            LinkType.EXTERNAL, target, location, "", tip
        )

    # -- reading ----------------------------------------------------------

    def cell_at(self, row: int, column: int) -> Cell | None:
        return self.cells.get(row, {}).get(column)

    def read(self, row: int, column: int) -> Any:
        """Return the cell's value, its formula text (with ``=``) or its date/time."""
        cell = self.cell_at(row, column)
        if cell is None:
            return None
        if cell.has_formula():
            formula = cell.formula
            if formula.formula_type is FormulaType.NORMAL:
                return "=" + (formula.text or "")
            if formula.formula_type is FormulaType.SHARED:
                if formula.text:
                    return "=" + formula.text
                root = self.shared_formulas.get(formula.shared_index, CellFormula())
                converted = convert_shared_formula(
                    root.text or "",
                    root.reference.top_left(),
                    CellReference(row, column),
                )
                return "=" + converted
        if cell.is_date_time():
            return cell.date_time(self.date1904)
        return cell.value

    # -- merges -----------------------------------------------------------

    def merge_cells(self, cell_range: CellRange) -> None:
        """Merge a range; every cell but the top-left one is cleared."""
        if cell_range.row_count() < 2 and cell_range.column_count() < 2:
            raise ValueError("a merged range needs at least two cells")
        self._require(cell_range.first_row, cell_range.first_column)
        for r in range(cell_range.first_row, cell_range.last_row + 1):
            for c in range(cell_range.first_column, cell_range.last_column + 1):
                is_origin = (r, c) == (cell_range.first_row, cell_range.first_column)
                if is_origin and self.cell_at(r, c) is not None:
                    continue
                self.write_blank(r, c)
        self.merges.append(dataclasses.replace(cell_range))

    def unmerge_cells(self, cell_range: CellRange) -> None:
        try:
            self.merges.remove(cell_range)
        except ValueError:
            raise ValueError(f"range {cell_range} is not merged") from None

    def merged_cells(self) -> list[CellRange]:
        if self.sheet_type is SheetType.WORKSHEET:
            return list(self.merges)
        return []

    # -- columns ----------------------------------------------------------

    def _column_infos(self, first: int, last: int) -> list[ColumnInfo]:
        if first > last:
            return []
        if not self._check_dimensions(1, last, ignore_row=True):
            return []
        if not self._check_dimensions(1, first, ignore_row=True):
            return []
        return self.columns.info_list(first, last)

    def _require_columns(self, first: int, last: int) -> list[ColumnInfo]:
        infos = self._column_infos(first, last)
        if not infos:
            raise ValueError(f"invalid column range {first}..{last}")
        return infos

    def set_column_width(self, first: int, last: int, width: float) -> None:
        for info in self._require_columns(first, last):
            info.width = width
            info.is_set_width = True

    def set_column_hidden(self, first: int, last: int, hidden: bool) -> None:
        for info in self._require_columns(first, last):
            info.hidden = hidden

    def column_width(self, column: int) -> float:
        infos = self._column_infos(column, column)
        if len(infos) == 1 and infos[0].is_set_width:
            return infos[0].width
        return self.sheet_format_props.default_col_width

    def is_column_hidden(self, column: int) -> bool:
        infos = self._column_infos(column, column)
        return len(infos) == 1 and infos[0].hidden

    def group_columns(self, first: int, last: int, collapsed: bool = True) -> None:
        self.columns.group(first, last, collapsed)

    # -- rows -------------------------------------------------------------

    def _row_infos(self, first: int, last: int) -> list[RowInfo]:
        min_col = max(self._dimension.first_column, 1)
        infos = []
        for row in range(first, last + 1):
            if not self._check_dimensions(row, min_col, ignore_col=True):
                continue
            infos.append(self.rows_info.setdefault(row, RowInfo()))
        return infos

    def _require_rows(self, first: int, last: int) -> list[RowInfo]:
        infos = self._row_infos(first, last)
        if not infos:
            raise ValueError(f"invalid row range {first}..{last}")
        return infos

    def set_row_height(self, first: int, last: int, height: float) -> None:
        for info in self._require_rows(first, last):
            info.height = height
            info.custom_height = True

    def set_row_hidden(self, first: int, last: int, hidden: bool) -> None:
        for info in self._require_rows(first, last):
            info.hidden = hidden

    def _row_info(self, row: int) -> RowInfo | None:
        min_col = self._dimension.first_column if self._dimension.is_valid() else 1
        if not self._check_dimensions(row, min_col, ignore_col=True):
            return None
        return self.rows_info.get(row)

    def row_height(self, row: int) -> float:
        info = self._row_info(row)
        if info is None:
            return self.sheet_format_props.default_row_height
        return info.height

    def is_row_hidden(self, row: int) -> bool:
        info = self._row_info(row)
        return info is not None and info.hidden

    def group_rows(self, first: int, last: int, collapsed: bool = True) -> None:
        for row in range(first, last + 1):
            info = self.rows_info.setdefault(row, RowInfo())
            info.outline_level += 1
            if collapsed:
                info.hidden = True
        if collapsed:
            self.rows_info.setdefault(last + 1, RowInfo()).collapsed = True

    # -- whole sheet ------------------------------------------------------

    def dimension(self) -> CellRange:
        return dataclasses.replace(self._dimension)

    def set_dimension(self, cell_range: CellRange) -> None:
        self._dimension = dataclasses.replace(cell_range)

    def set_start_page(self, page: int) -> None:
        self.page_setup.first_page_number = str(page)

    def get_full_cells(self) -> tuple[list[CellLocation], int, int]:
        """Return every cell with its position, plus the largest row and column."""
        if self.sheet_type is SheetType.CHARTSHEET:
            return [], -1, -1
        if self.sheet_type is not SheetType.WORKSHEET:
            raise ValueError(f"unsupported sheet type {self.sheet_type.value}")
        locations = []
        max_row = max_col = -1
        for row in sorted(self.cells):
            for col in sorted(self.cells[row]):
                max_row = max(max_row, row)
                max_col = max(max_col, col)
                locations.append(CellLocation(row, col, self.cells[row][col]))
        return locations, max_row, max_col

    def validate_dimension(self) -> None:
        """Derive the used range from the cells when none is recorded."""
        rows = [row for row, columns in self.cells.items() if columns]
        if self._dimension.is_valid() or not rows:
            return
        first_col = min(min(self.cells[r]) for r in rows)
        last_col = max(max(self.cells[r]) for r in rows)
        candidate = CellRange(min(rows), first_col, max(rows), last_col)
        if candidate.is_valid():
            self._dimension = candidate