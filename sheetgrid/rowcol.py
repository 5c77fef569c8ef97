"""Row and column layout records and the column range table."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from sheetgrid.reference import COLUMN_MAX


@dataclass
class RowInfo:
    """Height, style, visibility and outline data of one row."""

    height: float = 0.0
    format: Any = None
    hidden: bool = False
    custom_height: bool = False
    outline_level: int = 0
    collapsed: bool = False


@dataclass
class ColumnInfo:
    """Width, style, visibility and outline data of a run of columns."""

    first_column: int = 0
    last_column: int = 1
    is_set_width: bool = False
    width: float = 0.0
    format: Any = None
    hidden: bool = False
    custom_width: bool = False
    outline_level: int = 0
    collapsed: bool = False


@dataclass
class SheetFormatProps:
    """Sheet-wide defaults for row and column sizes."""

    base_col_width: int = 8
    custom_height: bool = False
    default_col_width: float = 8.43
    default_row_height: float = 15.0
    outline_level_col: int = 0
    outline_level_row: int = 0
    thick_bottom: bool = False
    thick_top: bool = False
    zero_height: bool = False


class ColumnTable:
    """Non-overlapping column runs keyed by their first column.

    Each column covered by a run also maps straight to that run.
    """

    def __init__(self) -> None:
        self._infos: dict[int, ColumnInfo] = {}
        self._by_column: dict[int, ColumnInfo] = {}

    def __len__(self) -> int:
        return len(self._infos)

    def __iter__(self) -> Iterator[ColumnInfo]:
        for key in sorted(self._infos):
            yield self._infos[key]

    def add(self, info: ColumnInfo) -> None:
        """Store a run under its first column and map each of its columns to it."""
        self._infos[info.first_column] = info
        for column in range(info.first_column, info.last_column + 1):
            self._by_column[column] = info

    def info_for(self, column: int) -> ColumnInfo | None:
        """Return the run covering ``column``, or None."""
        return self._by_column.get(column)

    def split(self, first: int, last: int) -> None:
        """Split existing runs so that ``first`` starts a run and ``last`` ends one."""
        for key in sorted(self._infos):
            info = self._infos[key]
            if info.first_column < first <= info.last_column:
                tail = dataclasses.replace(info, first_column=first)
                info.last_column = first - 1
                self.add(tail)
                break
        for key in sorted(self._infos):
            info = self._infos[key]
            if info.first_column <= last < info.last_column:
                tail = dataclasses.replace(info, first_column=last + 1)
                info.last_column = last
                self.add(tail)
                break

    def _nodes(self, first: int, last: int) -> list[int]:
        self.split(first, last)
        nodes = [first]
        for column in sorted(k for k in self._infos if first <= k <= last):
            if nodes[-1] != column:
                nodes.append(column)
            next_column = self._infos[column].last_column + 1
            if next_column <= last:
                nodes.append(next_column)
        return nodes

    def _runs(self, first: int, last: int) -> Iterator[tuple[int, int]]:
        nodes = self._nodes(first, last)
        for start, following in zip(nodes, nodes[1:] + [last + 1]):
            yield start, following - 1

    def info_list(self, first: int, last: int) -> list[ColumnInfo]:
        """Return the runs exactly covering columns ``first`` to ``last``.

        Missing runs are created. An invalid column range gives an empty list.
        """
        if not 1 <= first <= last <= COLUMN_MAX:
            return []
        result = []
        for start, end in self._runs(first, last):
            info = self._infos.get(start)
            if info is None:
                info = ColumnInfo(start, end)
                self.add(info)
            result.append(info)
        return result

    def group(self, first: int, last: int, collapsed: bool = True) -> None:
        """Raise the outline level of columns ``first`` to ``last``.

        When collapsed, the columns are hidden and the column after them is
        marked as the collapsed one.
        """
        for start, end in self._runs(first, last):
            info = self._infos.get(start)
            if info is None:
                info = ColumnInfo(start, end)
                self.add(info)
            info.outline_level += 1
            if collapsed:
                info.hidden = True

        if collapsed:
            column = last + 1
            self.split(column, column)
            info = self._infos.get(column)
            if info is None:
                info = ColumnInfo(column, column)
                self.add(info)
            info.collapsed = True