"""Cyclopts CLI entrypoint for building the offline documentation PDF.

The ``docbinder`` console script defined here prints every configured
documentation page with headless Chromium and binds the results into one PDF
with a cover, a contents page, and continuous page numbers. Without options
it uses the built-in page list and writes ``build/docs.pdf``.

Examples
--------
Build the snapshot with the default configuration:

>>> from docbinder.cli import main
>>> main()  # doctest: +SKIP

Build from a YAML override with debug logging:

>>> from docbinder.cli import app
>>> app.run(["build", "--config", "snapshot.yaml", "--verbose"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_snapshot_config
from .pipeline import SnapshotPipeline

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

app = App(name="docbinder", config=cyclopts.config.Env("DOCBINDER_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _setup_logging(*, verbose: bool) -> None:
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    level = logging.DEBUG if verbose else logging.INFO
    root_logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("pypdf").setLevel(logging.WARNING)


@app.command(help="Print the configured pages and bind them into one PDF.")
def build(
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Optional YAML overrides", env_var="DOCBINDER_CONFIG"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Enable debug logging")
    ] = False,
) -> None:
    """Render, merge, and number the documentation snapshot.

    Parameters
    ----------
    config : Path or None, optional
        YAML file overriding the built-in pages, paths, or print settings.
        When ``None`` (default) the built-in values are used.
    verbose : bool, optional
        Log at debug level, including best-effort steps that were skipped.

    Returns
    -------
    None
        Writes the merged PDF and prints its path.
    """
    _setup_logging(verbose=verbose)
    snapshot_config = load_snapshot_config(config)
    result = SnapshotPipeline(snapshot_config).run()
    for url in result.skipped:
        print(f"skipped {url}")
    print(f"wrote {_format_path(result.output_path)} ({result.total_pages} pages)")


def main() -> None:
    """Invoke the Cyclopts application behind the ``docbinder`` command.

    Any failure is logged with its traceback and the process exits with
    status 1.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    try:
        app()
    except Exception:
        log.exception("Snapshot build failed")
        raise SystemExit(1) from None


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
