"""Shared fixtures for docbinder tests.

No test launches a browser or touches the network: section PDFs are drawn
with ReportLab, cover art is generated with Pillow, and the renderer is a
stand-in that writes those PDFs to the staging directory.
"""

from __future__ import annotations

import contextlib
import io
import typing as typ

import pytest
from PIL import Image
from reportlab.pdfgen import canvas

from docbinder._constants import A4_SIZE
from docbinder.config import SnapshotConfig
from docbinder.cover import CoverImageClient

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from pytest_mock import MockerFixture


def write_section_pdf(path: Path, *, pages: int, label: str = "section") -> Path:
    """Write a ``pages``-page A4 PDF whose pages read ``<label> page <n>``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    pdf = canvas.Canvas(str(path), pagesize=A4_SIZE)
    for number in range(1, pages + 1):
        pdf.setFont("Helvetica", 14)
        pdf.drawString(72, 720, f"{label} page {number}")
        pdf.showPage()
    pdf.save()
    return path


class FakeRenderer:
    """Renderer double that prints canned sections instead of real pages."""

    def __init__(self, pages: cabc.Mapping[str, tuple[str, int]]) -> None:
        self.pages = dict(pages)
        self.rendered: list[tuple[str, Path]] = []

    def render(self, url: str, out_path: Path) -> str:
        title, page_count = self.pages[url]
        write_section_pdf(out_path, pages=page_count, label=title)
        self.rendered.append((url, out_path))
        return title

    def factory(
        self, _config: SnapshotConfig
    ) -> contextlib.AbstractContextManager[FakeRenderer]:
        return contextlib.nullcontext(self)


@pytest.fixture
def png_bytes() -> bytes:
    """Return a small 4:3 PNG used as cover art."""
    buffer = io.BytesIO()
    Image.new("RGB", (40, 30), (200, 40, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def image_client(mocker: MockerFixture, png_bytes: bytes) -> CoverImageClient:
    """Cover image client that serves ``png_bytes`` without network access."""
    client = mocker.Mock(spec=CoverImageClient)
    client.fetch.return_value = png_bytes
    return client


@pytest.fixture
def snapshot_config(tmp_path: Path) -> SnapshotConfig:
    """Default config with output and staging redirected under ``tmp_path``."""
    return SnapshotConfig(
        output_path=tmp_path / "build" / "docs.pdf",
        staging_dir=tmp_path / "build" / "tmp",
    )


@pytest.fixture
def make_section_pdf() -> cabc.Callable[..., Path]:
    """Expose :func:`write_section_pdf` to tests."""
    return write_section_pdf


@pytest.fixture
def make_renderer() -> cabc.Callable[
    [cabc.Mapping[str, tuple[str, int]]], FakeRenderer
]:
    """Build a :class:`FakeRenderer` from ``{url: (title, page_count)}``."""
    return FakeRenderer
