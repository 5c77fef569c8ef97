"""Sheet view flags, page layout records and hyperlink data of a worksheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class SheetView:
    """Display options of a worksheet window."""

    window_protection: bool = False
    show_formulas: bool = False
    show_grid_lines: bool = True
    show_row_col_headers: bool = True
    show_zeros: bool = True
    right_to_left: bool = False
    tab_selected: bool = False
    show_ruler: bool = False
    show_outline_symbols: bool = True
    show_white_space: bool = True


@dataclass
class PageMargins:
    """Page margins, kept as the text read from or written to the sheet."""

    left: str = ""
    right: str = ""
    top: str = ""
    bottom: str = ""
    header: str = ""
    footer: str = ""

    def is_complete(self) -> bool:
        """Tell whether every margin is set; only then are margins written out."""
        return all(
            (self.left, self.right, self.top, self.bottom, self.header, self.footer)
        )


@dataclass
class PageSetup:
    """Printer page setup; written out only when ``r_id`` is set."""

    r_id: str = ""
    paper_size: str = ""
    scale: str = ""
    first_page_number: str = ""
    orientation: str = ""
    use_first_page_number: str = ""
    horizontal_dpi: str = ""
    vertical_dpi: str = ""
    copies: str = ""


@dataclass
class HeaderFooter:
    """Odd-page header and footer text; None means not present."""

    odd_header: str | None = None
    odd_footer: str | None = None
    align_with_margins: str = ""

    def is_empty(self) -> bool:
        """Tell whether neither header nor footer is present."""
        return self.odd_header is None and self.odd_footer is None


class LinkType(Enum):
    EXTERNAL = "external"
    INTERNAL = "internal"


@dataclass
class HyperlinkData:
    """A hyperlink attached to a cell."""

    link_type: LinkType = LinkType.EXTERNAL
    target: str = ""
    location: str = ""
    display: str = ""
    tooltip: str = ""