"""Locate the ``shipctl.toml`` that applies to a working directory.

``SHIPCTL_CONFIG`` names a file directly and disables the search. Otherwise
the nearest ``shipctl.toml`` in the directory or any of its ancestors wins,
so a storefront repo can keep one calendar at its root.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "shipctl.toml"
CONFIG_ENV_VAR = "SHIPCTL_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    directory = start.resolve()
    yield directory
    yield from directory.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``SHIPCTL_CONFIG`` pointing at a missing file yields None rather than
    falling back to the directory search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
