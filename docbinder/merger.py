"""Concatenate staged section PDFs into a single document.

Pages are copied, not re-rendered, so each section keeps its printed layout.
While copying, :func:`merge_sections` records the page number each section
will start on once the cover and contents pages are placed in front of it.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from pypdf import PdfReader, PdfWriter

from ._constants import DEFAULT_TITLE_AFFIX
from .models import TocEntry
from .titles import clean_toc_title

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .models import RenderedSection

log = logging.getLogger(__name__)

PRODUCER = "docbinder"


@dc.dataclass(slots=True)
class MergedDocument:
    """The output document as it is assembled.

    Attributes
    ----------
    writer : PdfWriter
        Holds the pages in their final order.
    entries : list[TocEntry]
        Contents entries, one per merged section.
    section_page_counts : list[int]
        Number of pages copied from each section, in section order.
    front_matter_pages : int
        Pages reserved ahead of the sections (cover plus contents pages).
    numbered : bool
        Set once page labels have been stamped.
    """

    writer: PdfWriter
    entries: list[TocEntry]
    section_page_counts: list[int]
    front_matter_pages: int
    numbered: bool = False

    @property
    def page_count(self) -> int:
        """Return the number of pages currently in the document."""
        return len(self.writer.pages)

    def add_section_outline(self) -> None:
        """Bookmark the first page of every section.

        Call after the front matter is inserted so entry page numbers line up
        with page indices.
        """
        for entry in self.entries:
            self.writer.add_outline_item(entry.title, entry.page_number - 1)

    def set_metadata(self, title: str) -> None:
        self.writer.add_metadata({"/Title": title, "/Producer": PRODUCER})

    def write(self, path: Path) -> None:
        """Serialize the document to ``path``, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as handle:
            self.writer.write(handle)


def merge_sections(
    sections: cabc.Sequence[RenderedSection],
    *,
    front_matter_pages: int,
    title_affix: str = DEFAULT_TITLE_AFFIX,
) -> MergedDocument:
    """Copy every section's pages in order and compute their start pages.

    Parameters
    ----------
    sections : Sequence[RenderedSection]
        Staged sections in output order.
    front_matter_pages : int
        Pages that will precede the first section (the cover and every
        contents page).
    title_affix : str, optional
        Site label stripped from section titles for the contents.

    Returns
    -------
    MergedDocument
        Document containing only the section pages, with one
        :class:`TocEntry` per section whose ``page_number`` is
        ``front_matter_pages + pages of earlier sections + 1``.
    """
    writer = PdfWriter()
    entries: list[TocEntry] = []
    counts: list[int] = []
    pages_before = front_matter_pages
    for section in sections:
        reader = PdfReader(section.path)
        for page in reader.pages:
            writer.add_page(page)
        copied = len(reader.pages)
        entries.append(
            TocEntry(
                title=clean_toc_title(section.raw_title, title_affix),
                page_number=pages_before + 1,
            )
        )
        counts.append(copied)
        log.debug("Merged %d page(s) from %s", copied, section.path)
        pages_before += copied
    return MergedDocument(
        writer=writer,
        entries=entries,
        section_page_counts=counts,
        front_matter_pages=front_matter_pages,
    )


__all__ = ["MergedDocument", "PRODUCER", "merge_sections"]
