"""Print documentation pages to PDF with a headless Chromium browser.

:class:`PageRenderer` drives a single Playwright page through a fixed
sequence of stages for every URL: navigate and wait for network idle, switch
to print emulation, let deferred layout settle, inject the print stylesheet,
print an A4 PDF, and report the page title. The browser lifetime is owned by
:func:`open_renderer`, which closes it whether or not rendering succeeds.

Example
-------
>>> from pathlib import Path
>>> from docbinder.config import SnapshotConfig
>>> from docbinder.renderer import open_renderer
>>> with open_renderer(SnapshotConfig()) as renderer:  # doctest: +SKIP
...     renderer.render("https://example.com/", Path("build/tmp/00.pdf"))
'Example Domain'
"""

from __future__ import annotations

import contextlib
import dataclasses as dc
import logging
import typing as typ

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from playwright.sync_api import Page

    from .config import SnapshotConfig

log = logging.getLogger(__name__)

PAPER_FORMAT = "A4"


class RenderError(RuntimeError):
    """Raised when a page cannot be loaded or printed."""


class Renderer(typ.Protocol):
    """Anything able to print a URL to ``out_path`` and report its title."""

    def render(self, url: str, out_path: Path) -> str: ...


@dc.dataclass(slots=True, frozen=True)
class EmulationResult:
    """Outcome of the best-effort print emulation stage."""

    applied: bool
    error: str | None = None


class PageRenderer:
    """Render URLs one after another on a shared Playwright page."""

    def __init__(
        self,
        page: Page,
        *,
        print_css: str,
        navigation_timeout_ms: int,
        settle_delay_ms: int,
    ) -> None:
        """Bind the renderer to an open page and the print settings.

        Parameters
        ----------
        page : Page
            Playwright page reused for every navigation.
        print_css : str
            Stylesheet injected after the page settles.
        navigation_timeout_ms : int
            Bound on reaching network idle; exceeding it aborts the run.
        settle_delay_ms : int
            Fixed pause before the stylesheet is injected.
        """
        self._page = page
        self.print_css = print_css
        self.navigation_timeout_ms = navigation_timeout_ms
        self.settle_delay_ms = settle_delay_ms

    def render(self, url: str, out_path: Path) -> str:
        """Print ``url`` to ``out_path`` and return the page title.

        Raises
        ------
        RenderError
            If navigation times out or the browser reports an error while
            loading or printing the page.
        """
        self._navigate(url)
        emulation = self.emulate_print()
        if not emulation.applied:
            log.debug("Print emulation unavailable for %s: %s", url, emulation.error)
        self._settle()
        self._inject_styles(url)
        self._print(url, out_path)
        return self._page.title()

    def emulate_print(self) -> EmulationResult:
        """Switch to print media with a light colour scheme, if supported."""
        try:
            self._page.emulate_media(media="print", color_scheme="light")
        except PlaywrightError as exc:
            return EmulationResult(applied=False, error=str(exc))
        return EmulationResult(applied=True)

    def _navigate(self, url: str) -> None:
        try:
            self._page.goto(
                url, wait_until="networkidle", timeout=self.navigation_timeout_ms
            )
        except PlaywrightTimeoutError as exc:
            msg = (
                f"Timed out after {self.navigation_timeout_ms} ms waiting for "
                f"'{url}' to reach network idle"
            )
            raise RenderError(msg) from exc
        except PlaywrightError as exc:
            msg = f"Failed to load '{url}': {exc}"
            raise RenderError(msg) from exc

    def _settle(self) -> None:
        self._page.wait_for_timeout(self.settle_delay_ms)

    def _inject_styles(self, url: str) -> None:
        try:
            self._page.add_style_tag(content=self.print_css)
        except PlaywrightError as exc:
            msg = f"Failed to inject print styles into '{url}': {exc}"
            raise RenderError(msg) from exc

    def _print(self, url: str, out_path: Path) -> None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._page.pdf(
                path=str(out_path),
                format=PAPER_FORMAT,
                print_background=True,
                display_header_footer=False,
            )
        except PlaywrightError as exc:
            msg = f"Failed to print '{url}' to PDF: {exc}"
            raise RenderError(msg) from exc


@contextlib.contextmanager
def open_renderer(config: SnapshotConfig) -> cabc.Iterator[PageRenderer]:
    """Launch headless Chromium and yield a renderer bound to one page.

    The browser is closed when the block exits, including on error.
    """
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=True)
        try:
            context = browser.new_context(viewport=config.viewport.as_dict())
            page = context.new_page()
            yield PageRenderer(
                page,
                print_css=config.print_css,
                navigation_timeout_ms=config.navigation_timeout_ms,
                settle_delay_ms=config.settle_delay_ms,
            )
        finally:
            browser.close()


__all__ = [
    "EmulationResult",
    "PAPER_FORMAT",
    "PageRenderer",
    "RenderError",
    "Renderer",
    "open_renderer",
]
