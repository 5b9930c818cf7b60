r"""Fetch the cover artwork and draw the cover page.

The cover is a landscape 4:3 page filled with a dark background, with the
remote image scaled to fit and centred on top. :class:`CoverImageClient`
wraps the HTTP fetch so sessions and timeouts can be injected, mirroring how
the rest of the project talks to remote services.

Example
-------
>>> from docbinder.cover import CoverImageClient, build_cover_page
>>> client = CoverImageClient(timeout=5)  # doctest: +SKIP
>>> page = build_cover_page(client.fetch("https://example.com/cover.png"))  # doctest: +SKIP
>>> page.mediabox.width  # doctest: +SKIP
793.706
"""

from __future__ import annotations

import dataclasses as dc
import io
import typing as typ
from http import HTTPStatus

import requests
from reportlab.lib.utils import ImageReader

from ._constants import COVER_BACKGROUND_RGB, COVER_SIZE
from .drawing import draw_pages

if typ.TYPE_CHECKING:
    from pypdf import PageObject
    from reportlab.pdfgen.canvas import Canvas


class CoverImageError(RuntimeError):
    """Raised when the cover image cannot be fetched or decoded."""


@dc.dataclass(slots=True, frozen=True)
class ImagePlacement:
    """Position and size of an image drawn on a page."""

    x: float
    y: float
    width: float
    height: float


class CoverImageClient:
    """Download cover artwork over HTTP(S).

    The client performs a single request per call; failures are not retried
    and surface as :class:`CoverImageError`.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._session = session or requests.Session()
        self.timeout = timeout
        self._headers = {"User-Agent": "docbinder/0.1", "Accept": "image/*"}

    def fetch(self, url: str) -> bytes:
        """Return the raw bytes served at ``url``.

        Raises
        ------
        CoverImageError
            If the request fails, the server answers with an error status,
            or the body is empty.
        """
        try:
            response = self._session.get(
                url, headers=self._headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            msg = f"Failed to fetch cover image '{url}': {exc}"
            raise CoverImageError(msg) from exc

        if response.status_code >= HTTPStatus.BAD_REQUEST:
            msg = (
                f"Cover image request for '{url}' failed with "
                f"status {response.status_code}"
            )
            raise CoverImageError(msg)
        if not response.content:
            msg = f"Cover image response for '{url}' was empty"
            raise CoverImageError(msg)
        return response.content


def fit_image(
    image_size: tuple[float, float], page_size: tuple[float, float]
) -> ImagePlacement:
    """Scale ``image_size`` to fit ``page_size`` and centre it.

    The aspect ratio is preserved; the image grows or shrinks until one side
    meets the page edge.

    >>> fit_image((400, 100), (800, 600))
    ImagePlacement(x=0.0, y=200.0, width=800.0, height=200.0)
    """
    image_width, image_height = image_size
    page_width, page_height = page_size
    scale = min(page_width / image_width, page_height / image_height)
    width = image_width * scale
    height = image_height * scale
    return ImagePlacement(
        x=(page_width - width) / 2,
        y=(page_height - height) / 2,
        width=width,
        height=height,
    )


def build_cover_page(
    image_bytes: bytes,
    *,
    page_size: tuple[float, float] = COVER_SIZE,
    background: tuple[float, float, float] = COVER_BACKGROUND_RGB,
) -> PageObject:
    """Draw the cover page with ``image_bytes`` centred over ``background``."""
    try:
        image = ImageReader(io.BytesIO(image_bytes))
        image_size = image.getSize()
    except OSError as exc:
        msg = f"Cover image could not be decoded: {exc}"
        raise CoverImageError(msg) from exc
    placement = fit_image(image_size, page_size)
    page_width, page_height = page_size

    def _draw(pdf: Canvas) -> None:
        pdf.setFillColorRGB(*background)
        pdf.rect(0, 0, page_width, page_height, stroke=0, fill=1)
        pdf.drawImage(
            image,
            placement.x,
            placement.y,
            width=placement.width,
            height=placement.height,
            mask="auto",
        )

    (page,) = draw_pages(page_size, _draw)
    return page


__all__ = [
    "CoverImageClient",
    "CoverImageError",
    "ImagePlacement",
    "build_cover_page",
    "fit_image",
]
