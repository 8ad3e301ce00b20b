"""Vendoring boundaries."""

from __future__ import annotations

import logging
from pathlib import Path

from ..discovery import LOCAL, Filesystem

logger = logging.getLogger(__name__)

VENDOR_DIR = "vendor"


def vendor_parent(directory: Path, fs: Filesystem = LOCAL) -> Path:
    """Return the directory containing the outermost vendor tree above ``directory``.

    Vendored code is versioned by the manifest of the project that vendors
    it, and for vendor-within-vendor trees that is the outermost one. If
    ``directory`` is not inside a vendor tree it is returned unchanged.
    """
    parts = directory.parts
    for index, part in enumerate(parts):
        if part != VENDOR_DIR or index == 0:
            continue
        parent = Path(*parts[:index])
        if fs.is_dir(parent / VENDOR_DIR):
            logger.debug("%s is vendored by %s", directory, parent)
            return parent
    return directory
