"""Lay out and draw the contents pages, then place them behind the cover.

Layout and drawing are separate steps. :class:`TocLayout` only does the
arithmetic (where each title, dotted leader, and page number goes, and how
many pages that takes) so the page count is known before sections are merged
and the numbers it prints are final. :func:`render_toc_pages` turns a
:class:`TocPlan` into PDF pages with ReportLab, and
:func:`insert_front_matter` puts the cover and contents pages at the front of
the merged document.

Examples
--------
>>> layout = TocLayout()
>>> layout.page_count(3)
1
>>> dot_count(10.0, 3.0)
3
"""

from __future__ import annotations

import dataclasses as dc
import math
import typing as typ

from reportlab.pdfbase.pdfmetrics import stringWidth

from ._constants import A4_SIZE, BODY_FONT, HEADING_FONT
from .drawing import draw_pages

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pypdf import PageObject
    from reportlab.pdfgen.canvas import Canvas

    from .merger import MergedDocument
    from .models import TocEntry

TOC_HEADING = "Contents"
TOC_CONTINUED_HEADING = "Contents (cont.)"
ELLIPSIS = "..."

WidthFn = typ.Callable[[str, float], float]


def helvetica_width(text: str, size: float) -> float:
    """Return the width of ``text`` set in Helvetica at ``size`` points."""
    return stringWidth(text, BODY_FONT, size)


def dot_count(available: float, dot_width: float) -> int:
    """Return how many dots of ``dot_width`` fit in ``available`` points.

    Never negative; a non-positive ``dot_width`` yields zero dots.
    """
    if dot_width <= 0 or available <= 0:
        return 0
    return max(0, math.floor(available / dot_width))


@dc.dataclass(slots=True, frozen=True)
class TocHeading:
    """Heading drawn at the top of a contents page."""

    page_index: int
    text: str
    x: float
    y: float
    font_size: float


@dc.dataclass(slots=True, frozen=True)
class TocLine:
    """A fully positioned contents line."""

    page_index: int
    y: float
    title: str
    title_x: float
    dots: str
    dots_x: float
    page_label: str
    page_x: float


@dc.dataclass(slots=True, frozen=True)
class TocPlan:
    """Every heading and line of the contents, grouped by page index."""

    page_size: tuple[float, float]
    font_size: float
    headings: list[TocHeading]
    lines: list[TocLine]

    @property
    def page_count(self) -> int:
        return len(self.headings)


@dc.dataclass(slots=True)
class TocLayout:
    """Geometry of the contents pages, in PDF points.

    Titles start at ``left_x``; page numbers are right-aligned on
    ``page_width - right_margin``. The dotted leader begins ``dot_gap``
    after the title and stops at least ``number_gap`` before the number
    edge. A new page starts once a line drops below ``bottom_y`` and more
    entries remain.
    """

    page_size: tuple[float, float] = A4_SIZE
    font_size: float = 12
    heading_size: float = 22
    continued_heading_size: float = 18
    heading_x: float = 50
    top_y: float = 780
    heading_gap: float = 32
    continued_heading_gap: float = 28
    left_x: float = 60
    right_margin: float = 60
    dot_gap: float = 8
    number_gap: float = 20
    line_height: float = 20
    bottom_y: float = 80
    measure: WidthFn = helvetica_width

    @property
    def number_edge(self) -> float:
        return self.page_size[0] - self.right_margin

    def page_count(self, entry_count: int) -> int:
        """Return the contents pages needed for ``entry_count`` entries.

        There is always at least one page, even with no entries.
        """
        if entry_count <= 0:
            return 1
        page_index, _y = self._positions(entry_count)[-1]
        return page_index + 1

    def lay_out(self, entries: cabc.Sequence[TocEntry]) -> TocPlan:
        """Position the heading and line of every entry."""
        positions = self._positions(len(entries))
        pages = self.page_count(len(entries))
        headings = [self._heading(index) for index in range(pages)]
        lines = [
            self._line(entry, page_index, y)
            for entry, (page_index, y) in zip(entries, positions, strict=True)
        ]
        return TocPlan(
            page_size=self.page_size,
            font_size=self.font_size,
            headings=headings,
            lines=lines,
        )

    def _positions(self, entry_count: int) -> list[tuple[int, float]]:
        positions: list[tuple[int, float]] = []
        page_index = 0
        y = self.top_y - self.heading_gap
        for index in range(entry_count):
            positions.append((page_index, y))
            y -= self.line_height
            if y < self.bottom_y and index < entry_count - 1:
                page_index += 1
                y = self.top_y - self.continued_heading_gap
        return positions

    def _heading(self, page_index: int) -> TocHeading:
        if page_index == 0:
            return TocHeading(
                0, TOC_HEADING, self.heading_x, self.top_y, self.heading_size
            )
        return TocHeading(
            page_index,
            TOC_CONTINUED_HEADING,
            self.heading_x,
            self.top_y,
            self.continued_heading_size,
        )

    def _line(self, entry: TocEntry, page_index: int, y: float) -> TocLine:
        page_label = str(entry.page_number)
        page_width = self.measure(page_label, self.font_size)
        dots_end = self.number_edge - max(self.number_gap, page_width)
        title = self._fit_title(entry.title, dots_end - self.dot_gap - self.left_x)
        dots_x = self.left_x + self.measure(title, self.font_size) + self.dot_gap
        count = dot_count(dots_end - dots_x, self.measure(".", self.font_size))
        return TocLine(
            page_index=page_index,
            y=y,
            title=title,
            title_x=self.left_x,
            dots="." * count,
            dots_x=dots_x,
            page_label=page_label,
            page_x=self.number_edge - page_width,
        )

    def _fit_title(self, title: str, max_width: float) -> str:
        """Truncate ``title`` with an ellipsis until it fits ``max_width``."""
        if self.measure(title, self.font_size) <= max_width:
            return title
        cut = len(title)
        while cut > 0:
            cut -= 1
            candidate = title[:cut].rstrip() + ELLIPSIS
            if self.measure(candidate, self.font_size) <= max_width:
                return candidate
        return ELLIPSIS


def render_toc_pages(plan: TocPlan) -> list[PageObject]:
    """Draw ``plan`` and return one PDF page per contents page."""

    def _draw(pdf: Canvas) -> None:
        for page_index, heading in enumerate(plan.headings):
            if page_index:
                pdf.showPage()
            pdf.setFont(HEADING_FONT, heading.font_size)
            pdf.drawString(heading.x, heading.y, heading.text)
            pdf.setFont(BODY_FONT, plan.font_size)
            for line in plan.lines:
                if line.page_index != page_index:
                    continue
                pdf.drawString(line.title_x, line.y, line.title)
                if line.dots:
                    pdf.drawString(line.dots_x, line.y, line.dots)
                pdf.drawString(line.page_x, line.y, line.page_label)

    return draw_pages(plan.page_size, _draw)


def insert_front_matter(
    document: MergedDocument, cover: PageObject, toc_pages: cabc.Sequence[PageObject]
) -> None:
    """Place ``cover`` first and the contents pages right after it, in order."""
    expected = document.front_matter_pages - 1
    if len(toc_pages) != expected:
        msg = (
            f"Expected {expected} contents page(s) to match the reserved front "
            f"matter, got {len(toc_pages)}"
        )
        raise ValueError(msg)
    document.writer.insert_page(cover, 0)
    for index, page in enumerate(toc_pages, start=1):
        document.writer.insert_page(page, index)


__all__ = [
    "ELLIPSIS",
    "TOC_CONTINUED_HEADING",
    "TOC_HEADING",
    "TocHeading",
    "TocLayout",
    "TocLine",
    "TocPlan",
    "dot_count",
    "helvetica_width",
    "insert_front_matter",
    "render_toc_pages",
]
