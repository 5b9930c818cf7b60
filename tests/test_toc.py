"""Unit tests for contents layout arithmetic and drawing."""

from __future__ import annotations

import math

import pytest
from pypdf import PdfWriter

from docbinder._constants import A4_SIZE
from docbinder.merger import MergedDocument
from docbinder.models import TocEntry
from docbinder.toc import (
    ELLIPSIS,
    TOC_CONTINUED_HEADING,
    TOC_HEADING,
    TocLayout,
    dot_count,
    helvetica_width,
    insert_front_matter,
    render_toc_pages,
)

ENTRIES_PER_PAGE = 34


@pytest.mark.parametrize(
    ("available", "dot_width", "expected"),
    [
        (10.0, 3.0, 3),
        (9.0, 3.0, 3),
        (2.9, 3.0, 0),
        (0.0, 3.0, 0),
        (-15.0, 3.0, 0),
        (10.0, 0.0, 0),
    ],
)
def test_dot_count_floors_and_never_goes_negative(
    available: float, dot_width: float, expected: int
) -> None:
    assert dot_count(available, dot_width) == expected


@pytest.mark.parametrize(
    ("entries", "pages"),
    [
        (0, 1),
        (1, 1),
        (ENTRIES_PER_PAGE, 1),
        (ENTRIES_PER_PAGE + 1, 2),
        (2 * ENTRIES_PER_PAGE, 2),
        (2 * ENTRIES_PER_PAGE + 1, 3),
    ],
)
def test_page_count_tracks_overflow(entries: int, pages: int) -> None:
    """A continuation page starts only when entries remain past the threshold."""
    assert TocLayout().page_count(entries) == pages


def test_lines_fill_to_the_number_column() -> None:
    """Title, leader, and number stay inside the page and never overlap."""
    layout = TocLayout()
    entries = [
        TocEntry("Usage", 3),
        TocEntry("Customizing", 5),
        TocEntry("FAQ", 128),
        TocEntry("W" * 120, 1234),
    ]
    plan = layout.lay_out(entries)
    dot_width = helvetica_width(".", layout.font_size)
    page_width = A4_SIZE[0]

    for line in plan.lines:
        title_end = line.title_x + helvetica_width(line.title, layout.font_size)
        dots_end = line.dots_x + len(line.dots) * dot_width
        number_end = line.page_x + helvetica_width(line.page_label, layout.font_size)
        assert title_end < line.dots_x, f"leader overlaps title {line.title!r}"
        assert dots_end <= line.page_x, f"leader overlaps number for {line.title!r}"
        assert number_end == pytest.approx(page_width - layout.right_margin)
        assert number_end <= page_width


def test_leader_matches_available_space() -> None:
    """Dot count is the floor of the gap between title and number column."""
    layout = TocLayout()
    (line,) = layout.lay_out([TocEntry("Usage", 3)]).lines
    dot_width = helvetica_width(".", layout.font_size)
    leader_end = layout.number_edge - layout.number_gap
    gap = leader_end - line.dots_x

    assert line.title == "Usage"
    assert line.title_x == layout.left_x
    assert line.dots_x == pytest.approx(
        layout.left_x + helvetica_width("Usage", layout.font_size) + layout.dot_gap
    )
    assert len(line.dots) == math.floor(gap / dot_width)
    assert line.dots_x + len(line.dots) * dot_width <= leader_end


def test_long_titles_are_truncated() -> None:
    layout = TocLayout()
    (line,) = layout.lay_out([TocEntry("Extremely long section title " * 10, 9)]).lines
    assert line.title.endswith(ELLIPSIS)
    assert line.title.startswith("Extremely long section title")


def test_positions_follow_line_height_and_continue_on_new_page() -> None:
    layout = TocLayout()
    entries = [TocEntry(f"Section {n}", n + 3) for n in range(ENTRIES_PER_PAGE + 2)]
    plan = layout.lay_out(entries)

    first, second = plan.lines[0], plan.lines[1]
    assert first.y == layout.top_y - layout.heading_gap
    assert first.y - second.y == layout.line_height

    overflow = plan.lines[ENTRIES_PER_PAGE]
    assert plan.lines[ENTRIES_PER_PAGE - 1].page_index == 0
    assert overflow.page_index == 1
    assert overflow.y == layout.top_y - layout.continued_heading_gap
    assert [heading.text for heading in plan.headings] == [
        TOC_HEADING,
        TOC_CONTINUED_HEADING,
    ]


def test_render_toc_pages_draws_every_page() -> None:
    entries = [TocEntry(f"Section {n}", n + 4) for n in range(ENTRIES_PER_PAGE + 1)]
    pages = render_toc_pages(TocLayout().lay_out(entries))

    assert len(pages) == 2
    first_text = pages[0].extract_text()
    second_text = pages[1].extract_text()
    assert TOC_HEADING in first_text
    assert "Section 0" in first_text
    assert TOC_CONTINUED_HEADING in second_text
    assert f"Section {ENTRIES_PER_PAGE}" in second_text


def test_insert_front_matter_orders_cover_then_contents() -> None:
    """Cover lands at index 0 and contents pages follow in order."""
    writer = PdfWriter()
    for _ in range(2):
        writer.add_blank_page(width=A4_SIZE[0], height=A4_SIZE[1])
    document = MergedDocument(
        writer=writer, entries=[], section_page_counts=[2], front_matter_pages=3
    )
    cover_writer = PdfWriter()
    cover = cover_writer.add_blank_page(width=800, height=600)
    toc_pages = render_toc_pages(
        TocLayout().lay_out(
            [TocEntry(f"Section {n}", n + 4) for n in range(ENTRIES_PER_PAGE + 1)]
        )
    )

    insert_front_matter(document, cover, toc_pages)

    assert document.page_count == 5
    assert float(writer.pages[0].mediabox.width) == 800
    assert TOC_HEADING in writer.pages[1].extract_text()
    assert TOC_CONTINUED_HEADING in writer.pages[2].extract_text()


def test_insert_front_matter_rejects_mismatched_reservation() -> None:
    document = MergedDocument(
        writer=PdfWriter(), entries=[], section_page_counts=[], front_matter_pages=2
    )
    cover = PdfWriter().add_blank_page(width=800, height=600)
    with pytest.raises(ValueError, match="Expected 1 contents page"):
        insert_front_matter(document, cover, [])
