"""Bridge ReportLab drawing into pypdf page objects."""

from __future__ import annotations

import io
import typing as typ

from pypdf import PdfReader
from reportlab.pdfgen import canvas

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pypdf import PageObject


def draw_pages(
    pagesize: tuple[float, float], draw: cabc.Callable[[canvas.Canvas], None]
) -> list[PageObject]:
    """Run ``draw`` against an in-memory canvas and return the pages it made.

    ``draw`` may call ``showPage`` to start further pages; the final page is
    closed by ``save``.
    """
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=pagesize)
    draw(pdf)
    pdf.save()
    buffer.seek(0)
    return list(PdfReader(buffer).pages)


__all__ = ["draw_pages"]
