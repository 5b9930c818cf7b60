"""High-level orchestration for building the documentation snapshot PDF.

:class:`SnapshotPipeline` runs a fixed sequence of blocking stages:

1. select the configured URLs, skipping any that carry a query string;
2. print each remaining URL to the staging directory, in order;
3. merge the staged sections, reserving room for the cover and contents;
4. fetch the cover art and draw the cover and contents pages;
5. stamp ``current / total`` on every page;
6. write the result to the configured output path.

Any failure propagates to the caller; a failed run leaves no final document
behind, although staged section PDFs may remain.

Example
-------
>>> from docbinder.config import load_snapshot_config
>>> from docbinder.pipeline import SnapshotPipeline
>>> result = SnapshotPipeline(load_snapshot_config()).run()  # doctest: +SKIP
>>> result.output_path  # doctest: +SKIP
PosixPath('build/docs.pdf')
"""

from __future__ import annotations

import logging
import typing as typ
from urllib.parse import urlsplit

from ._constants import STAGING_NAME_TEMPLATE
from .cover import CoverImageClient, build_cover_page
from .merger import merge_sections
from .models import RenderedSection, SnapshotResult
from .pagination import stamp_page_numbers
from .renderer import open_renderer
from .toc import TocLayout, insert_front_matter, render_toc_pages

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import contextlib

    from .config import SnapshotConfig
    from .renderer import Renderer

    RendererFactory = cabc.Callable[
        [SnapshotConfig], contextlib.AbstractContextManager[Renderer]
    ]

log = logging.getLogger(__name__)


def select_pages(urls: cabc.Iterable[str]) -> tuple[list[str], list[str]]:
    """Split ``urls`` into those to render and those skipped for a query string.

    Every URL must be absolute, with a scheme and a host. A relative or
    malformed entry raises before anything is rendered, so a typo in the page
    list fails the run instead of surfacing later as a navigation error.

    Raises
    ------
    ValueError
        If any URL lacks a scheme or a host.

    >>> select_pages(["https://a.example/", "https://a.example/?q=1"])
    (['https://a.example/'], ['https://a.example/?q=1'])
    """
    selected: list[str] = []
    skipped: list[str] = []
    for url in urls:
        parts = urlsplit(url)
        if not (parts.scheme and parts.netloc):
            msg = f"Invalid page URL {url!r}: expected an absolute URL"
            raise ValueError(msg)
        if parts.query:
            log.info("Skipping URL with query: %s", url)
            skipped.append(url)
            continue
        selected.append(url)
    return selected, skipped


class SnapshotPipeline:
    """Render, merge, and number the configured documentation pages."""

    def __init__(
        self,
        config: SnapshotConfig,
        *,
        renderer_factory: RendererFactory = open_renderer,
        image_client: CoverImageClient | None = None,
        toc_layout: TocLayout | None = None,
    ) -> None:
        """Prepare a pipeline run.

        Parameters
        ----------
        config : SnapshotConfig
            Pages, paths, and print settings for this run.
        renderer_factory : callable, optional
            Returns a context manager yielding a :class:`Renderer`; defaults
            to :func:`open_renderer`, which launches headless Chromium.
        image_client : CoverImageClient, optional
            Client used to download the cover art.
        toc_layout : TocLayout, optional
            Contents page geometry; defaults to the standard A4 layout.
        """
        self.config = config
        self._renderer_factory = renderer_factory
        self._image_client = image_client or CoverImageClient()
        self.toc_layout = toc_layout or TocLayout()

    def run(self) -> SnapshotResult:
        """Build the snapshot and write it to ``config.output_path``."""
        selected, skipped = select_pages(self.config.pages)
        sections = self.render_sections(selected)

        log.info("Merging and enhancing %d section(s)", len(sections))
        image_bytes = self._image_client.fetch(self.config.cover_image_url)
        cover = build_cover_page(image_bytes)

        toc_pages = self.toc_layout.page_count(len(sections))
        document = merge_sections(
            sections,
            front_matter_pages=1 + toc_pages,
            title_affix=self.config.title_affix,
        )
        plan = self.toc_layout.lay_out(document.entries)
        insert_front_matter(document, cover, render_toc_pages(plan))
        document.add_section_outline()
        document.set_metadata(self.config.document_title)

        total = stamp_page_numbers(document)
        document.write(self.config.output_path)
        log.info("Done! -> %s (%d pages)", self.config.output_path, total)
        return SnapshotResult(
            output_path=self.config.output_path,
            entries=list(document.entries),
            total_pages=total,
            skipped=skipped,
        )

    def render_sections(self, urls: cabc.Sequence[str]) -> list[RenderedSection]:
        """Print ``urls`` in order to zero-padded files in the staging directory."""
        if not urls:
            return []
        staging_dir = self.config.staging_dir
        staging_dir.mkdir(parents=True, exist_ok=True)
        sections: list[RenderedSection] = []
        with self._renderer_factory(self.config) as renderer:
            for index, url in enumerate(urls):
                out_path = staging_dir / STAGING_NAME_TEMPLATE.format(index=index)
                log.info("Printing %s", url)
                title = renderer.render(url, out_path)
                sections.append(
                    RenderedSection(url=url, raw_title=title, path=out_path)
                )
        return sections


__all__ = ["SnapshotPipeline", "select_pages"]
