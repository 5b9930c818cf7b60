"""Bind a fixed list of documentation pages into one offline PDF.

This package prints each configured page with headless Chromium, merges the
results behind a cover and a table of contents, and numbers every page.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docbinder import main
>>> main()  # doctest: +SKIP
>>> from docbinder import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
