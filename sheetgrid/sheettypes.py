"""Sheet kinds, visibility states and the common sheet base."""

from __future__ import annotations

from enum import Enum


class SheetType(Enum):
    WORKSHEET = "worksheet"
    CHARTSHEET = "chartsheet"
    DIALOGSHEET = "dialogsheet"
    MACROSHEET = "macrosheet"


class SheetState(Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    VERY_HIDDEN = "veryHidden"


class AbstractSheet:
    """Name, id, kind and visibility shared by every sheet."""

    def __init__(
        self,
        name: str,
        sheet_id: int = 1,
        sheet_type: SheetType = SheetType.WORKSHEET,
        sheet_state: SheetState = SheetState.VISIBLE,
        file_path: str = "",
    ) -> None:
        self.name = name
        self.sheet_id = sheet_id
        self.sheet_type = sheet_type
        self.sheet_state = sheet_state
        self.file_path = file_path

    def is_hidden(self) -> bool:
        return self.sheet_state is not SheetState.VISIBLE

    def is_visible(self) -> bool:
        return not self.is_hidden()

    def set_hidden(self, hidden: bool) -> None:
        """Hide or show the sheet; an already hidden sheet keeps its state."""
        if hidden == self.is_hidden():
            return
        self.sheet_state = SheetState.HIDDEN if hidden else SheetState.VISIBLE

    def set_visible(self, visible: bool) -> None:
        self.set_hidden(not visible)