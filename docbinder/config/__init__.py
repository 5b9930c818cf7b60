"""Load and validate the configuration for a docbinder snapshot run.

The defaults reproduce the fixed page list, output paths, and print
stylesheet the snapshot has always used. :func:`load_snapshot_config` returns
those defaults or overlays a YAML file on top of them, producing a
:class:`SnapshotConfig` that is passed explicitly into the pipeline.

Examples
--------
>>> from pathlib import Path
>>> from docbinder.config import load_snapshot_config
>>> config = load_snapshot_config(Path("snapshot.yaml"))  # doctest: +SKIP
>>> config.pages[0]  # doctest: +SKIP
'https://nextui.loveretro.games/docs/'
"""

from .loader import load_snapshot_config
from .models import SnapshotConfig, SnapshotConfigError, Viewport

__all__ = [
    "SnapshotConfig",
    "SnapshotConfigError",
    "Viewport",
    "load_snapshot_config",
]
