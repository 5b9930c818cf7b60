"""Unit tests for loading the snapshot configuration."""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

from docbinder._constants import DEFAULT_PAGES, PRINT_CSS
from docbinder.config import (
    SnapshotConfig,
    SnapshotConfigError,
    Viewport,
    load_snapshot_config,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture
def write_config(tmp_path: Path) -> cabc.Callable[[str], Path]:
    """Write YAML text to ``snapshot.yaml`` under ``tmp_path``."""

    def _write(text: str) -> Path:
        path = tmp_path / "snapshot.yaml"
        path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
        return path

    return _write


def test_defaults_without_path() -> None:
    """No path yields the built-in page list, paths, and print settings."""
    config = load_snapshot_config()
    assert config.pages == list(DEFAULT_PAGES)
    assert config.output_path == Path("build/docs.pdf")
    assert config.staging_dir == Path("build/tmp")
    assert config.print_css == PRINT_CSS
    assert config.navigation_timeout_ms == 60_000
    assert config.settle_delay_ms == 500
    assert config.viewport == Viewport(width=1280, height=900)


def test_default_page_lists_are_independent() -> None:
    """Each config owns its page list."""
    first = SnapshotConfig()
    first.pages.append("https://example.invalid/extra/")
    assert SnapshotConfig().pages == list(DEFAULT_PAGES)


def test_yaml_overrides_only_present_keys(
    write_config: cabc.Callable[[str], Path],
) -> None:
    """Keys in the YAML replace defaults; everything else is kept."""
    path = write_config(
        """
        pages:
          - https://docs.example.invalid/intro/
          - https://docs.example.invalid/faq/
        output_path: dist/handbook.pdf
        settle_delay_ms: 0
        viewport:
          width: 1024
        """
    )
    config = load_snapshot_config(path)

    assert config.pages == [
        "https://docs.example.invalid/intro/",
        "https://docs.example.invalid/faq/",
    ]
    assert config.output_path == Path("dist/handbook.pdf")
    assert config.settle_delay_ms == 0
    assert config.viewport == Viewport(width=1024, height=900)
    assert config.staging_dir == Path("build/tmp"), "staging_dir should stay default"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_snapshot_config(tmp_path / "absent.yaml")


def test_top_level_must_be_mapping(write_config: cabc.Callable[[str], Path]) -> None:
    path = write_config("- just\n- a list")
    with pytest.raises(TypeError):
        load_snapshot_config(path)


@pytest.mark.parametrize(
    ("text", "fragment"),
    [
        ("pages: []", "pages"),
        ("pages: [42]", "pages[]"),
        ("navigation_timeout_ms: 0", "navigation_timeout_ms"),
        ("settle_delay_ms: -5", "settle_delay_ms"),
        ("viewport: wide", "viewport"),
        ("title_affix: '(unclosed'", "title_affix"),
        ("render_in_parallel: true", "render_in_parallel"),
    ],
)
def test_invalid_values_are_rejected(
    write_config: cabc.Callable[[str], Path], text: str, fragment: str
) -> None:
    """Malformed values raise SnapshotConfigError naming the offending key."""
    path = write_config(text)
    with pytest.raises(SnapshotConfigError, match=re.escape(fragment)):
        load_snapshot_config(path)
