"""Serialising a worksheet to its ``sheetN.xml`` part."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from sheetgrid.cell import Cell, CellType
from sheetgrid.reference import COLUMN_MAX, CellReference
from sheetgrid.utility import is_space_reserve_needed
from sheetgrid.worksheet import Worksheet

MAIN_NAMESPACE = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
REL_NAMESPACE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
HYPERLINK_REL_TYPE = REL_NAMESPACE + "/hyperlink"

_XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'

Relationship = tuple[str, str, str]


def _number(value: float) -> str:
    return f"{value:.15g}"


def _short(value: float) -> str:
    return f"{value:g}"


def _as_float(value: Any) -> float:
    if isinstance(value, (bool, int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0


def _style_index(fmt: Any) -> str | None:
    """Return the style index a row or column format stands for, if any."""
    if fmt is None:
        return None
    if isinstance(fmt, bool):
        return None
    if isinstance(fmt, int):
        return str(fmt) if fmt >= 0 else None
    return str(fmt)


def calculate_spans(sheet: Worksheet) -> dict[int, str]:
    """Return the ``spans`` text of each block of 16 rows, keyed by block number."""
    dim = sheet.dimension()
    spans: dict[int, str] = {}
    span_min = COLUMN_MAX + 1
    span_max = -1
    for row in range(dim.first_row, dim.last_row + 1):
        columns = sheet.cells.get(row)
        if columns:
            for col in range(dim.first_column, dim.last_column + 1):
                if col not in columns:
                    continue
                if span_max == -1:
                    span_min = span_max = col
                elif col < span_min:
                    span_min = col
                elif col > span_max:
                    span_max = col
        if row % 16 == 0 or row == dim.last_row:
            if span_max != -1:
                spans[row // 16] = f"{span_min}:{span_max}"
                span_min = COLUMN_MAX + 1
                span_max = -1
    return spans


def dimension_string(sheet: Worksheet) -> str:
    """Return the used range in A1 notation, ``A1`` for an empty sheet."""
    dim = sheet.dimension()
    if not dim.is_valid():
        return "A1"
    return dim.to_string()


def _append_formula(element: ET.Element, cell: Cell) -> None:
    if cell.has_formula():
        element.append(cell.formula.to_xml())


def _text_child(parent: ET.Element, tag: str, text: str) -> ET.Element:
    child = ET.SubElement(parent, tag)
    child.text = text
    return child


def _cell_element(sheet: Worksheet, row: int, col: int, cell: Cell) -> ET.Element:
    element = ET.Element("c", {"r": CellReference(row, col).to_string()})

    style: str | None = None
    if cell.style_number >= 0:
        style = str(cell.style_number)
    else:
        row_info = sheet.rows_info.get(row)
        if row_info is not None:
            style = _style_index(row_info.format)
        if style is None:
            col_info = sheet.columns.info_for(col)
            if col_info is not None:
                style = _style_index(col_info.format)
    if style is not None:
        element.set("s", style)

    kind = cell.cell_type
    if kind is CellType.SHARED_STRING:
        element.set("t", "s")
        index = sheet.shared_strings.index_of(str(cell.value if cell.value is not None else ""))
        _text_child(element, "v", str(index))
    elif kind is CellType.INLINE_STRING:
        element.set("t", "inlineStr")
        inline = ET.SubElement(element, "is")
        text = str(cell.value if cell.value is not None else "")
        t = _text_child(inline, "t", text)
        if is_space_reserve_needed(text):
            t.set("xml:space", "preserve")
    elif kind is CellType.NUMBER:
        element.set("t", "n")
        _append_formula(element, cell)
        if cell.value is not None:
            _text_child(element, "v", _number(_as_float(cell.value)))
    elif kind is CellType.STRING:
        element.set("t", "str")
        _append_formula(element, cell)
        _text_child(element, "v", str(cell.value if cell.value is not None else ""))
    elif kind is CellType.BOOLEAN:
        element.set("t", "b")
        _append_formula(element, cell)
        _text_child(element, "v", "1" if cell.value else "0")
    elif kind is CellType.DATE:
        element.set("t", "n")
        _text_child(element, "v", _number(_as_float(cell.value)))
    elif kind is CellType.ERROR:
        element.set("t", "e")
        _text_child(element, "v", str(cell.value if cell.value is not None else ""))
    else:
        _append_formula(element, cell)
        if cell.value is not None:
            _text_child(element, "v", _number(_as_float(cell.value)))
    return element


def _sheet_data(sheet: Worksheet, parent: ET.Element) -> None:
    dim = sheet.dimension()
    spans = calculate_spans(sheet)
    for row in range(dim.first_row, dim.last_row + 1):
        columns = sheet.cells.get(row)
        row_info = sheet.rows_info.get(row)
        if columns is None and row_info is None:
            continue
        row_el = ET.SubElement(parent, "row", {"r": str(row)})
        span = spans.get((row - 1) // 16, "")
        if span:
            row_el.set("spans", span)
        if row_info is not None:
            style = _style_index(row_info.format)
            if style is not None:
                row_el.set("s", style)
                row_el.set("customFormat", "1")
            if row_info.custom_height:
                row_el.set("ht", _short(row_info.height))
                row_el.set("customHeight", "1")
            else:
                row_el.set("customHeight", "0")
            if row_info.hidden:
                row_el.set("hidden", "1")
            if row_info.outline_level > 0:
                row_el.set("outlineLevel", str(row_info.outline_level))
            if row_info.collapsed:
                row_el.set("collapsed", "1")
        if columns:
            for col in range(dim.first_column, dim.last_column + 1):
                cell = columns.get(col)
                if cell is not None:
                    row_el.append(_cell_element(sheet, row, col, cell))


def _sheet_view(sheet: Worksheet, parent: ET.Element) -> None:
    view = sheet.view
    views = ET.SubElement(parent, "sheetViews")
    element = ET.SubElement(views, "sheetView")
    flags = [
        ("windowProtection", view.window_protection, True),
        ("showFormulas", view.show_formulas, True),
        ("showGridLines", view.show_grid_lines, False),
        ("showRowColHeaders", view.show_row_col_headers, False),
        ("showZeros", view.show_zeros, False),
        ("rightToLeft", view.right_to_left, True),
        ("tabSelected", view.tab_selected, True),
        ("showRuler", view.show_ruler, False),
        ("showOutlineSymbols", view.show_outline_symbols, False),
        ("showWhiteSpace", view.show_white_space, False),
    ]
    for name, value, written_when in flags:
        if bool(value) is written_when:
            element.set(name, "1" if written_when else "0")
    element.set("workbookViewId", "0")


def _sheet_format(sheet: Worksheet, parent: ET.Element) -> None:
    element = ET.SubElement(
        parent, "sheetFormatPr", {"defaultRowHeight": _short(sheet.default_row_height)}
    )
    if sheet.default_row_height != 15:
        element.set("customHeight", "1")
    if sheet.default_row_zeroed:
        element.set("zeroHeight", "1")
    if sheet.outline_row_level:
        element.set("outlineLevelRow", str(sheet.outline_row_level))
    if sheet.outline_col_level:
        element.set("outlineLevelCol", str(sheet.outline_col_level))


def _columns(sheet: Worksheet, parent: ET.Element) -> None:
    if not len(sheet.columns):
        return
    cols = ET.SubElement(parent, "cols")
    for info in sheet.columns:
        col = ET.SubElement(
            cols, "col", {"min": str(info.first_column), "max": str(info.last_column)}
        )
        if info.width:
            col.set("width", _number(info.width))
        style = _style_index(info.format)
        if style is not None:
            col.set("style", style)
        if info.hidden:
            col.set("hidden", "1")
        if info.width:
            col.set("customWidth", "1")
        if info.outline_level:
            col.set("outlineLevel", str(info.outline_level))
        if info.collapsed:
            col.set("collapsed", "1")


def _merges(sheet: Worksheet, parent: ET.Element) -> None:
    if not sheet.merges:
        return
    element = ET.SubElement(parent, "mergeCells", {"count": str(len(sheet.merges))})
    for cell_range in sheet.merges:
        ET.SubElement(element, "mergeCell", {"ref": cell_range.to_string()})


def _page_layout(sheet: Worksheet, parent: ET.Element) -> None:
    margins = sheet.page_margins
    if margins.is_complete():
        ET.SubElement(
            parent,
            "pageMargins",
            {
                "left": margins.left,
                "right": margins.right,
                "top": margins.top,
                "bottom": margins.bottom,
                "header": margins.header,
                "footer": margins.footer,
            },
        )

    setup = sheet.page_setup
    if setup.r_id:
        element = ET.SubElement(parent, "pageSetup", {"r:id": setup.r_id})
        for name, value in (
            ("verticalDpi", setup.vertical_dpi),
            ("horizontalDpi", setup.horizontal_dpi),
            ("useFirstPageNumber", setup.use_first_page_number),
            ("firstPageNumber", setup.first_page_number),
            ("scale", setup.scale),
            ("paperSize", setup.paper_size),
            ("orientation", setup.orientation),
            ("copies", setup.copies),
        ):
            if value:
                element.set(name, value)

    header_footer = sheet.header_footer
    if not header_footer.is_empty():
        element = ET.SubElement(parent, "headerFooter")
        if header_footer.align_with_margins:
            element.set("alignWithMargins", header_footer.align_with_margins)
        if header_footer.odd_header is not None:
            _text_child(element, "oddHeader", header_footer.odd_header)
        if header_footer.odd_footer is not None:
            _text_child(element, "oddFooter", header_footer.odd_footer)


def _hyperlinks(
    sheet: Worksheet, parent: ET.Element, relationships: list[Relationship]
) -> None:
    if not sheet.url_table:
        return
    from sheetgrid.sheetview import LinkType

    element = ET.SubElement(parent, "hyperlinks")
    for row in sorted(sheet.url_table):
        for col in sorted(sheet.url_table[row]):
            data = sheet.url_table[row][col]
            link = ET.SubElement(
                element, "hyperlink", {"ref": CellReference(row, col).to_string()}
            )
            if data.link_type is LinkType.EXTERNAL:
                relationships.append((HYPERLINK_REL_TYPE, data.target, "External"))
                link.set("r:id", f"rId{len(relationships)}")
            if data.location:
                link.set("location", data.location)
            if data.display:
                link.set("display", data.display)
            if data.tooltip:
                link.set("tooltip", data.tooltip)


def save_worksheet(sheet: Worksheet) -> tuple[bytes, list[Relationship]]:
    """Serialise ``sheet`` and return the XML bytes with the relationships it needs.

    Each relationship is ``(type, target, target_mode)``; its position in the
    list, counted from one, is the number in its ``rIdN`` identifier.
    """
    relationships: list[Relationship] = []
    root = ET.Element("worksheet", {"xmlns": MAIN_NAMESPACE, "xmlns:r": REL_NAMESPACE})
    ET.SubElement(root, "dimension", {"ref": dimension_string(sheet)})
    _sheet_view(sheet, root)
    _sheet_format(sheet, root)
    _columns(sheet, root)
    sheet_data = ET.SubElement(root, "sheetData")
    if sheet.dimension().is_valid():
        _sheet_data(sheet, sheet_data)
    _merges(sheet, root)
    _page_layout(sheet, root)
    _hyperlinks(sheet, root, relationships)
    return _XML_DECLARATION + ET.tostring(root, encoding="utf-8"), relationships