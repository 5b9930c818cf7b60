"""Shared dataclasses passed between the snapshot pipeline stages."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


@dc.dataclass(slots=True, frozen=True)
class RenderedSection:
    """A page printed to the staging directory.

    Attributes
    ----------
    url : str
        Address the section was rendered from.
    raw_title : str
        Title reported by the browser, before site labels are stripped.
    path : Path
        Staged PDF holding the section's pages.
    """

    url: str
    raw_title: str
    path: Path


@dc.dataclass(slots=True, frozen=True)
class TocEntry:
    """One contents line: a cleaned section title and its first page."""

    title: str
    page_number: int


@dc.dataclass(slots=True)
class SnapshotResult:
    """Summary of a completed pipeline run.

    Attributes
    ----------
    output_path : Path
        Where the merged PDF was written.
    entries : list[TocEntry]
        Contents entries in section order.
    total_pages : int
        Page count of the written document, cover and contents included.
    skipped : list[str]
        Configured URLs left out because they carry a query string.
    """

    output_path: Path
    entries: list[TocEntry]
    total_pages: int
    skipped: list[str] = dc.field(default_factory=list)


__all__ = ["RenderedSection", "SnapshotResult", "TocEntry"]
