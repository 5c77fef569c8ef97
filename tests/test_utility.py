from datetime import date, datetime, time

import pytest

from sheetgrid.reference import CellReference
from sheetgrid.utility import (
    convert_shared_formula,
    datetime_from_number,
    datetime_to_number,
    is_space_reserve_needed,
    split_path,
    time_to_number,
)


def test_first_day_of_1900_system():
    assert datetime_to_number(datetime(1900, 1, 1)) == 1.0


def test_epoch_of_1904_system():
    assert datetime_to_number(datetime(1904, 1, 1), True) == 0


@pytest.mark.parametrize(
    "dt",
    [
        datetime(1900, 2, 27, 6, 0),
        datetime(1900, 3, 2, 18, 30),
        datetime(2021, 3, 4, 5, 6, 7),
        datetime(2024, 12, 31, 23, 59, 59),
    ],
)
@pytest.mark.parametrize("is1904", [False, True])
def test_datetime_round_trip(dt, is1904):
    if is1904 and dt.year < 1904:
        dt = dt.replace(year=dt.year + 10)
    assert datetime_from_number(datetime_to_number(dt, is1904), is1904) == dt


@pytest.mark.parametrize("d", [date(1900, 2, 28), date(1900, 3, 1), date(2023, 7, 14)])
def test_whole_number_gives_date(d):
    num = datetime_to_number(datetime.combine(d, time()))
    assert num == int(num)
    assert datetime_from_number(num) == d


@pytest.mark.parametrize("t", [time(0, 0, 1), time(12, 30, 15), time(23, 59, 59)])
def test_time_round_trip(t):
    num = time_to_number(t)
    assert 0 <= num < 1
    assert datetime_from_number(num) == t


def test_time_ordering():
    assert time_to_number(time(1)) < time_to_number(time(2)) < time_to_number(time(23))


def test_shared_formula_shifted():
    result = convert_shared_formula("A1+B1", CellReference(1, 1), CellReference(2, 1))
    assert result == "A2+B2"


def test_shared_formula_same_cell_unchanged():
    formula = "SUM(A1:B4)*C$2+$D3"
    root = CellReference(5, 5)
    assert convert_shared_formula(formula, root, root) == formula


def test_shared_formula_absolute_and_quoted_parts_kept():
    formula = '"A1"&$B$2'
    assert convert_shared_formula(formula, CellReference(1, 1), CellReference(9, 9)) == formula


def test_shared_formula_shift_is_reversible():
    formula = "A3*$B4+C$5-SUM(D6:E7)"
    root, other = CellReference(3, 1), CellReference(10, 4)
    shifted = convert_shared_formula(formula, root, other)
    assert shifted != formula
    assert convert_shared_formula(shifted, other, root) == formula


def test_space_reserve():
    assert is_space_reserve_needed(" lead")
    assert is_space_reserve_needed("trail\n")
    assert not is_space_reserve_needed("inner space")
    assert not is_space_reserve_needed("")


def test_split_path():
    assert split_path("xl/worksheets/sheet1.xml") == ("xl/worksheets", "sheet1.xml")
    assert split_path("workbook.xml") == (".", "workbook.xml")