from sheetgrid.sheettypes import AbstractSheet, SheetState, SheetType


def test_new_sheet_is_visible_worksheet():
    sheet = AbstractSheet("Data")
    assert sheet.is_visible()
    assert not sheet.is_hidden()
    assert sheet.sheet_type is SheetType.WORKSHEET


def test_set_hidden_and_back():
    sheet = AbstractSheet("Data")
    sheet.set_hidden(True)
    assert sheet.sheet_state is SheetState.HIDDEN
    assert not sheet.is_visible()
    sheet.set_visible(True)
    assert sheet.sheet_state is SheetState.VISIBLE


def test_very_hidden_kept_when_hiding():
    sheet = AbstractSheet("Data", sheet_state=SheetState.VERY_HIDDEN)
    assert sheet.is_hidden()
    sheet.set_hidden(True)
    assert sheet.sheet_state is SheetState.VERY_HIDDEN


def test_very_hidden_becomes_visible():
    sheet = AbstractSheet("Data", sheet_state=SheetState.VERY_HIDDEN)
    sheet.set_visible(True)
    assert sheet.sheet_state is SheetState.VISIBLE


def test_set_visible_false_hides():
    sheet = AbstractSheet("Chart", 2, SheetType.CHARTSHEET)
    sheet.set_visible(False)
    assert sheet.sheet_state is SheetState.HIDDEN
    assert sheet.sheet_type is SheetType.CHARTSHEET