"""Common literal values used across docbinder.

These constants hold the default page list, paths, print stylesheet, and
layout geometry so the config loader, renderer, and tests share one source of
truth. Callers should not read them directly at runtime; the pipeline receives
a :class:`~docbinder.config.SnapshotConfig` built from these defaults.

Examples
--------
>>> from docbinder import _constants
>>> _constants.STAGING_NAME_TEMPLATE.format(index=3)
'03.pdf'
>>> _constants.DEFAULT_PAGES[0]
'https://nextui.loveretro.games/docs/'
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_OUT_DIR = Path("build")
DEFAULT_STAGING_DIR = DEFAULT_OUT_DIR / "tmp"
DEFAULT_OUTPUT_PATH = DEFAULT_OUT_DIR / "docs.pdf"
STAGING_NAME_TEMPLATE = "{index:02d}.pdf"

DEFAULT_PAGES: tuple[str, ...] = (
    "https://nextui.loveretro.games/docs/",
    "https://nextui.loveretro.games/usage/",
    "https://nextui.loveretro.games/customizing/",
    "https://nextui.loveretro.games/paks/",
    "https://nextui.loveretro.games/shaders/",
    "https://nextui.loveretro.games/support/faq/",
)

DEFAULT_COVER_IMAGE_URL = (
    "https://raw.githubusercontent.com/Helaas/SDLReader-brick/main/"
    ".github/resources/tg5040%20controls.png"
)
DEFAULT_TITLE_AFFIX = r"Next\s*UI\s*Docs"
DEFAULT_DOCUMENT_TITLE = "NextUI Docs"

DEFAULT_NAVIGATION_TIMEOUT_MS = 60_000
DEFAULT_SETTLE_DELAY_MS = 500
DEFAULT_VIEWPORT_WIDTH = 1280
DEFAULT_VIEWPORT_HEIGHT = 900

PRINT_CSS = """
  @page { margin: 16mm; }

  html, body {
    background: #ffffff !important;
  }

  header, nav, aside, footer { display: none !important; }
  main { margin: 0 !important; }

  *, *::before, *::after { box-sizing: border-box !important; }
  img, svg, video, canvas { max-width: 100% !important; height: auto !important; }

  pre, code, kbd, samp {
    white-space: pre-wrap !important;
    word-break: break-word !important;
    overflow-wrap: anywhere !important;
  }

  table {
    width: 100% !important;
    table-layout: fixed !important;
    border-collapse: collapse !important;
    font-size: 90% !important;
    background: #ffffff !important;
  }
  th, td {
    white-space: normal !important;
    word-break: break-word !important;
    overflow-wrap: anywhere !important;
    vertical-align: top;
    padding: 6px 8px;
    background: #ffffff !important;
  }

  .overflow-x-auto, .overflow-auto, .overflow-scroll, .overflow-x-scroll {
    overflow: visible !important;
  }

  iframe[src*="youtube.com"] { display: none !important; }
"""

# Geometry in PDF points (1/72 inch).
A4_SIZE = (595.28, 841.89)
COVER_SIZE = (793.706, 595.28)
COVER_BACKGROUND_RGB = (13 / 255, 17 / 255, 23 / 255)

BODY_FONT = "Helvetica"
HEADING_FONT = "Helvetica-Bold"
FOOTER_FONT_SIZE = 10
FOOTER_OFFSET_Y = 18
