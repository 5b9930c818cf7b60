"""Load snapshot configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _build_viewport,
    _coerce_affix,
    _coerce_pages,
    _coerce_path,
    _require_positive_int,
    _require_str,
)
from .models import SnapshotConfig, SnapshotConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

_KNOWN_KEYS = frozenset(field.name for field in dc.fields(SnapshotConfig))


def load_snapshot_config(path: Path | None = None) -> SnapshotConfig:
    """Return the snapshot configuration, optionally overridden from YAML.

    Parameters
    ----------
    path : Path or None, optional
        YAML file whose top-level keys override the built-in defaults. When
        ``None`` (default) the built-in page list and paths are returned
        unchanged.

    Returns
    -------
    SnapshotConfig
        Fully resolved configuration for a single pipeline run.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    SnapshotConfigError
        If a key is unknown or a value has the wrong shape (for example an
        empty page list or a negative timeout).

    Examples
    --------
    >>> from docbinder.config import load_snapshot_config
    >>> config = load_snapshot_config()
    >>> config.output_path.name
    'docs.pdf'
    """
    config = SnapshotConfig()
    if path is None:
        return config
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return _apply_overrides(config, loaded)


def _apply_overrides(
    config: SnapshotConfig, raw: typ.Mapping[str, typ.Any]
) -> SnapshotConfig:
    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(unknown)}"
        raise SnapshotConfigError(msg)

    overrides: dict[str, typ.Any] = {}
    for key, value in raw.items():
        match key:
            case "pages":
                overrides[key] = _coerce_pages(value)
            case "output_path" | "staging_dir":
                overrides[key] = _coerce_path(value, key=key)
            case "navigation_timeout_ms":
                overrides[key] = _require_positive_int(value, key=key)
            case "settle_delay_ms":
                overrides[key] = _require_positive_int(value, key=key, allow_zero=True)
            case "viewport":
                overrides[key] = _build_viewport(value, config.viewport)
            case "title_affix":
                overrides[key] = _coerce_affix(value)
            case "print_css":
                if not isinstance(value, str):
                    msg = "'print_css' must be a string."
                    raise SnapshotConfigError(msg)
                overrides[key] = value
            case _:
                overrides[key] = _require_str(value, key=key)
    return dc.replace(config, **overrides)


__all__ = ["load_snapshot_config"]
