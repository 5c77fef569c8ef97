"""Cell references, cell ranges and cell locations in A1 notation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

ROW_MAX = 1048576
COLUMN_MAX = 16384
STRING_MAX = 32767

_CELL_PATTERN = re.compile(r"^\$?([A-Z]{1,3})\$?(\d+)$")


def _column_to_name(column: int) -> str:
    letters = []
    while column > 0:
        column, remainder = divmod(column - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def _name_to_column(name: str) -> int:
    column = 0
    for letter in name:
        column = column * 26 + (ord(letter) - ord("A") + 1)
    return column


@dataclass
class CellReference:
    """A one-based (row, column) position of a single cell."""

    row: int = -1
    column: int = -1

    @classmethod
    def from_string(cls, cell: str) -> CellReference:
        """Parse a reference such as ``B3`` or ``$B$3``; invalid text gives an invalid reference."""
        match = _CELL_PATTERN.match(cell)
        if not match:
            return cls()
        letters, digits = match.groups()
        return cls(int(digits), _name_to_column(letters))

    def to_string(self, row_abs: bool = False, col_abs: bool = False) -> str:
        """Render in A1 notation, with ``$`` markers where absolute; empty if invalid."""
        if not self.is_valid():
            return ""
        col_part = _column_to_name(self.column)
        row_part = str(self.row)
        if col_abs:
            col_part = "$" + col_part
        if row_abs:
            row_part = "$" + row_part
        return col_part + row_part

    def is_valid(self) -> bool:
        return self.row > 0 and self.column > 0

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class CellRange:
    """A rectangular block of cells, bounds included."""

    first_row: int = -1
    first_column: int = -1
    last_row: int = -1
    last_column: int = -1

    @classmethod
    def from_string(cls, text: str) -> CellRange:
        """Parse ``A1:C5`` or a single cell such as ``B2``."""
        parts = text.split(":")
        if len(parts) == 2:
            start = CellReference.from_string(parts[0])
            end = CellReference.from_string(parts[1])
        else:
            start = end = CellReference.from_string(parts[0])
        return cls(start.row, start.column, end.row, end.column)

    def to_string(self, row_abs: bool = False, col_abs: bool = False) -> str:
        """Render in A1 notation; a one-cell range renders as that cell; empty if invalid."""
        if not self.is_valid():
            return ""
        top_left = self.top_left().to_string(row_abs, col_abs)
        if self.first_row == self.last_row and self.first_column == self.last_column:
            return top_left
        return top_left + ":" + self.bottom_right().to_string(row_abs, col_abs)

    def is_valid(self) -> bool:
        return (
            self.first_column <= self.last_column
            and self.first_row <= self.last_row
            and self.first_column > 0
            and self.first_row > 0
        )

    def row_count(self) -> int:
        return self.last_row - self.first_row + 1

    def column_count(self) -> int:
        return self.last_column - self.first_column + 1

    def top_left(self) -> CellReference:
        return CellReference(self.first_row, self.first_column)

    def top_right(self) -> CellReference:
        return CellReference(self.first_row, self.last_column)

    def bottom_left(self) -> CellReference:
        return CellReference(self.last_row, self.first_column)

    def bottom_right(self) -> CellReference:
        return CellReference(self.last_row, self.last_column)

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class CellLocation:
    """A cell together with the row and column it sits at."""

    row: int = -1
    col: int = -1
    cell: Any = None