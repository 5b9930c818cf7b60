"""Stamp continuous ``current / total`` labels onto every page.

Numbering covers the cover and contents pages too, so it must run once the
document is complete. :func:`stamp_page_numbers` refuses to run twice on the
same document.
"""

from __future__ import annotations

import typing as typ

from reportlab.pdfbase.pdfmetrics import stringWidth

from ._constants import BODY_FONT, FOOTER_FONT_SIZE, FOOTER_OFFSET_Y
from .drawing import draw_pages

if typ.TYPE_CHECKING:
    from pypdf import PageObject
    from reportlab.pdfgen.canvas import Canvas

    from .merger import MergedDocument


class PaginationError(RuntimeError):
    """Raised when page labels would be stamped more than once."""


def format_page_label(current: int, total: int) -> str:
    """Return the footer label for page ``current`` of ``total``.

    >>> format_page_label(3, 8)
    '3 / 8'
    """
    return f"{current} / {total}"


def stamp_page_numbers(
    document: MergedDocument,
    *,
    font_size: float = FOOTER_FONT_SIZE,
    offset_y: float = FOOTER_OFFSET_Y,
) -> int:
    """Overlay a centred page label on every page of ``document``.

    Returns
    -------
    int
        The total page count printed on every label.

    Raises
    ------
    PaginationError
        If ``document`` has already been numbered.
    """
    if document.numbered:
        msg = "Page numbers have already been stamped on this document"
        raise PaginationError(msg)
    total = document.page_count
    for current, page in enumerate(document.writer.pages, start=1):
        label = format_page_label(current, total)
        page.merge_page(_label_overlay(page, label, font_size, offset_y))
    document.numbered = True
    return total


def _label_overlay(
    page: PageObject, label: str, font_size: float, offset_y: float
) -> PageObject:
    box = page.mediabox
    left, bottom = float(box.left), float(box.bottom)
    width = float(box.width)
    label_width = stringWidth(label, BODY_FONT, font_size)

    def _draw(pdf: Canvas) -> None:
        pdf.setFillColorRGB(0, 0, 0)
        pdf.setFont(BODY_FONT, font_size)
        pdf.drawString(left + (width - label_width) / 2, bottom + offset_y, label)

    (overlay,) = draw_pages((float(box.right), float(box.top)), _draw)
    return overlay


__all__ = ["PaginationError", "format_page_label", "stamp_page_numbers"]
