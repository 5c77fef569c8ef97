"""Date conversions, shared-formula translation and small text helpers."""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta
from enum import Enum, auto

from sheetgrid.reference import CellReference

_MS_PER_DAY = 86_400_000
_EPOCH_1900 = datetime(1899, 12, 31)
_EPOCH_1904 = datetime(1904, 1, 1)


def _epoch(is1904: bool) -> datetime:
    return _EPOCH_1904 if is1904 else _EPOCH_1900


def datetime_to_number(dt: datetime, is1904: bool = False) -> float:
    """Convert a datetime to a spreadsheet serial day number."""
    naive = dt.replace(tzinfo=None)
    excel_time = (naive - _epoch(is1904)) / timedelta(days=1)
    if not is1904 and excel_time > 59:
        # The 1900 system counts a 29 February 1900 that never existed.
        excel_time += 1
    return excel_time


def datetime_from_number(num: float, is1904: bool = False) -> datetime | date | time:
    """Convert a serial day number to a time (below one), a date (whole) or a datetime."""
    if not is1904 and num > 60:
        num -= 1
    msecs = math.trunc(num * _MS_PER_DAY + 0.5)
    result = _epoch(is1904) + timedelta(milliseconds=msecs)
    fractional, _ = math.modf(num)
    if num < 1:
        return result.time()
    if fractional == 0.0:
        return result.date()
    return result


def time_to_number(t: time) -> float:
    """Convert a time of day to a fraction of a day."""
    seconds = t.hour * 3600 + t.minute * 60 + t.second + t.microsecond / 1_000_000
    return seconds / 86400


class _RefState(Enum):
    INVALID = auto()
    PRE_AZ = auto()
    AZ = auto()
    PRE_09 = auto()
    DIGITS = auto()


_COL_ABSOLUTE = 0x01
_ROW_ABSOLUTE = 0x02


def convert_shared_formula(
    root_formula: str, root_cell: CellReference, cell: CellReference
) -> str:
    """Shift the relative references of a shared formula from ``root_cell`` to ``cell``."""
    segments: list[tuple[str, int | None]] = []
    segment = ""
    in_quote = False
    state = _RefState.INVALID
    flags = 0

    def close(new_segment: str) -> None:
        nonlocal segment
        segments.append((segment, flags if state is _RefState.DIGITS else None))
        segment = new_segment

    for ch in root_formula:
        if in_quote:
            segment += ch
            if ch == '"':
                in_quote = False
        elif ch == '"':
            in_quote = True
            state = _RefState.INVALID
            segment += ch
        elif ch == "$":
            if state is _RefState.AZ:
                segment += ch
                state = _RefState.PRE_09
                flags |= _ROW_ABSOLUTE
            else:
                close(ch)
                state = _RefState.PRE_AZ
                flags = _COL_ABSOLUTE
        elif "A" <= ch <= "Z":
            if state in (_RefState.PRE_AZ, _RefState.AZ):
                segment += ch
            else:
                close(ch)
                flags = 0
            state = _RefState.AZ
        elif "0" <= ch <= "9":
            segment += ch
            if state in (_RefState.AZ, _RefState.PRE_09, _RefState.DIGITS):
                state = _RefState.DIGITS
            else:
                state = _RefState.INVALID
        else:
            if state is _RefState.DIGITS:
                close(ch)
            else:
                segment += ch
            state = _RefState.INVALID

    if segment:
        segments.append((segment, flags if state is _RefState.DIGITS else None))

    parts = []
    for text, seg_flags in segments:
        if seg_flags is None or seg_flags == _COL_ABSOLUTE | _ROW_ABSOLUTE:
            parts.append(text)
            continue
        old = CellReference.from_string(text)
        row_abs = bool(seg_flags & _ROW_ABSOLUTE)
        col_abs = bool(seg_flags & _COL_ABSOLUTE)
        row = old.row if row_abs else old.row - root_cell.row + cell.row
        col = old.column if col_abs else old.column - root_cell.column + cell.column
        parts.append(CellReference(row, col).to_string(row_abs, col_abs))
    return "".join(parts)


def is_space_reserve_needed(text: str) -> bool:
    """Tell whether leading or trailing whitespace must be preserved in XML."""
    spaces = " \t\n\r"
    return bool(text) and (text[0] in spaces or text[-1] in spaces)


def split_path(path: str) -> tuple[str, str]:
    """Split a package path into its directory and file name."""
    idx = path.rfind("/")
    if idx == -1:
        return ".", path
    return path[:idx], path[idx + 1:]