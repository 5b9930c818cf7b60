"""Value coercion helpers shared by the snapshot config loader."""

from __future__ import annotations

import collections.abc as cabc
import re
from pathlib import Path

from .models import SnapshotConfigError, Viewport


def _require_str(value: object, *, key: str) -> str:
    """Return ``value`` stripped, rejecting non-strings and empty strings."""
    if not isinstance(value, str) or not value.strip():
        msg = f"'{key}' must be a non-empty string."
        raise SnapshotConfigError(msg)
    return value.strip()


def _require_positive_int(value: object, *, key: str, allow_zero: bool = False) -> int:
    """Return ``value`` as an int, rejecting booleans and out-of-range values."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'{key}' must be an integer, got {value!r}."
        raise SnapshotConfigError(msg)
    if value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        msg = f"'{key}' must be {bound}, got {value}."
        raise SnapshotConfigError(msg)
    return value


def _coerce_pages(value: object) -> list[str]:
    """Validate the ordered page list."""
    if not isinstance(value, list) or not value:
        msg = "'pages' must be a non-empty list of URLs."
        raise SnapshotConfigError(msg)
    return [_require_str(item, key="pages[]") for item in value]


def _coerce_path(value: object, *, key: str) -> Path:
    return Path(_require_str(value, key=key))


def _coerce_affix(value: object) -> str:
    """Validate the title affix pattern compiles."""
    pattern = _require_str(value, key="title_affix")
    try:
        re.compile(pattern)
    except re.error as exc:
        msg = f"'title_affix' is not a valid regular expression: {exc}"
        raise SnapshotConfigError(msg) from exc
    return pattern


def _build_viewport(payload: object, base: Viewport) -> Viewport:
    """Merge a ``viewport`` mapping over the default viewport."""
    if not isinstance(payload, cabc.Mapping):
        msg = "'viewport' must be a mapping with 'width' and 'height'."
        raise SnapshotConfigError(msg)
    return Viewport(
        width=_require_positive_int(
            payload.get("width", base.width), key="viewport.width"
        ),
        height=_require_positive_int(
            payload.get("height", base.height), key="viewport.height"
        ),
    )


__all__ = [
    "_build_viewport",
    "_coerce_affix",
    "_coerce_pages",
    "_coerce_path",
    "_require_positive_int",
    "_require_str",
]
