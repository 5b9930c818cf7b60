"""Typed dataclasses describing a documentation snapshot run."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import (
    DEFAULT_COVER_IMAGE_URL,
    DEFAULT_DOCUMENT_TITLE,
    DEFAULT_NAVIGATION_TIMEOUT_MS,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PAGES,
    DEFAULT_SETTLE_DELAY_MS,
    DEFAULT_STAGING_DIR,
    DEFAULT_TITLE_AFFIX,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    PRINT_CSS,
)


class SnapshotConfigError(ValueError):
    """Raised when the snapshot configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class Viewport:
    """Browser viewport used while rendering pages."""

    width: int = DEFAULT_VIEWPORT_WIDTH
    height: int = DEFAULT_VIEWPORT_HEIGHT

    def as_dict(self) -> dict[str, int]:
        """Return the mapping shape Playwright expects for ``viewport``."""
        return {"width": self.width, "height": self.height}


@dc.dataclass(slots=True)
class SnapshotConfig:
    """Every value the snapshot pipeline consumes, resolved up front.

    Attributes
    ----------
    pages : list[str]
        URLs to render, in the order their sections appear in the output.
    output_path : Path
        Destination of the merged PDF.
    staging_dir : Path
        Directory receiving the per-page PDFs (``00.pdf``, ``01.pdf``, ...).
    cover_image_url : str
        Remote image embedded on the cover page.
    print_css : str
        Stylesheet injected into each page before printing.
    title_affix : str
        Regular-expression fragment matching the site label stripped from
        page titles in the table of contents.
    navigation_timeout_ms : int
        Upper bound for reaching network idle on each page.
    settle_delay_ms : int
        Pause between print emulation and style injection.
    viewport : Viewport
        Browser viewport size.
    document_title : str
        Title recorded in the PDF metadata.
    """

    pages: list[str] = dc.field(default_factory=lambda: list(DEFAULT_PAGES))
    output_path: Path = DEFAULT_OUTPUT_PATH
    staging_dir: Path = DEFAULT_STAGING_DIR
    cover_image_url: str = DEFAULT_COVER_IMAGE_URL
    print_css: str = PRINT_CSS
    title_affix: str = DEFAULT_TITLE_AFFIX
    navigation_timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS
    settle_delay_ms: int = DEFAULT_SETTLE_DELAY_MS
    viewport: Viewport = dc.field(default_factory=Viewport)
    document_title: str = DEFAULT_DOCUMENT_TITLE


__all__ = ["SnapshotConfig", "SnapshotConfigError", "Viewport"]
