"""A single worksheet cell."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Any

from sheetgrid.formula import CellFormula
from sheetgrid.utility import datetime_from_number


class CellType(Enum):
    """Cell value kinds as stored in the ``t`` attribute of a cell."""

    BOOLEAN = "b"
    DATE = "d"
    ERROR = "e"
    INLINE_STRING = "inlineStr"
    NUMBER = "n"
    SHARED_STRING = "s"
    STRING = "str"
    CUSTOM = "custom"


_DATE_CAPABLE = frozenset({CellType.NUMBER, CellType.DATE, CellType.CUSTOM})


def _to_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return 0.0


@dataclass
class Cell:
    """A cell's value, type, formula and style.

    ``datetime_format`` is true when the cell's number format shows a date or time.
    """

    value: Any = None
    cell_type: CellType = CellType.NUMBER
    datetime_format: bool = False
    style_number: int = -1
    formula: CellFormula = field(default_factory=CellFormula)
    parent: Any = field(default=None, repr=False, compare=False)

    def has_formula(self) -> bool:
        return self.formula.is_valid()

    def is_date_time(self) -> bool:
        """Tell whether the value is a date, time or datetime serial number."""
        return (
            self.cell_type in _DATE_CAPABLE
            and self.datetime_format
            and _to_float(self.value) >= 0
        )

    def date_time(self, is1904: bool = False) -> datetime | date | time | None:
        """Return the value as a date/time, or None when the cell holds no date."""
        if not self.is_date_time():
            return None
        return datetime_from_number(_to_float(self.value), is1904)