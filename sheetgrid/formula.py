"""Cell formulas and their ``<f>`` XML form."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum

from sheetgrid.reference import CellRange


class FormulaType(Enum):
    NORMAL = "normal"
    ARRAY = "array"
    DATA_TABLE = "dataTable"
    SHARED = "shared"


@dataclass
class CellFormula:
    """A formula attached to a cell; a formula without text is not valid."""

    text: str | None = None
    formula_type: FormulaType = FormulaType.NORMAL
    reference: CellRange = field(default_factory=CellRange, compare=False)
    calculate: bool = field(default=False, compare=False)
    shared_index: int = 0

    def __post_init__(self) -> None:
        if self.text is None:
            return
        if self.text.startswith("="):
            self.text = self.text[1:]
        elif self.text.startswith("{=") and self.text.endswith("}"):
            self.text = self.text[2:-1]

    def is_valid(self) -> bool:
        return self.text is not None

    def to_xml(self) -> ET.Element:
        """Build the ``<f>`` element for this formula."""
        if not self.is_valid():
            raise ValueError("cannot serialise an empty formula")
        element = ET.Element("f")
        if self.formula_type is FormulaType.ARRAY:
            element.set("t", "array")
        elif self.formula_type is FormulaType.SHARED:
            element.set("t", "shared")
        if self.reference.is_valid():
            element.set("ref", self.reference.to_string())
        if self.calculate:
            element.set("ca", "1")
        if self.formula_type is FormulaType.SHARED:
            element.set("si", str(self.shared_index))
        if self.text:
            element.text = self.text
        return element

    @classmethod
    def from_xml(cls, element: ET.Element) -> CellFormula:
        """Read a formula from an ``<f>`` element."""
        kind = element.get("t", "")
        if kind == "array":
            formula_type = FormulaType.ARRAY
        elif kind == "shared":
            formula_type = FormulaType.SHARED
        else:
            formula_type = FormulaType.NORMAL
        reference = CellRange()
        if "ref" in element.attrib:
            reference = CellRange.from_string(element.get("ref", ""))
        shared_index = int(element.get("si", "0") or 0)
        calculate = element.get("ca", "") in ("1", "true")
        return cls(
            text=element.text or "",
            formula_type=formula_type,
            reference=reference,
            calculate=calculate,
            shared_index=shared_index,
        )