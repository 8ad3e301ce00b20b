"""Find the nearest dependency manifest above a directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..discovery import LOCAL, Filesystem, ancestors
from ..models.tool import DEFAULT_LOCKFILE_TOOLS, Tool

logger = logging.getLogger(__name__)


def nearest_lockfile(
    start: Path,
    fs: Filesystem = LOCAL,
    tools: Iterable[Tool] = DEFAULT_LOCKFILE_TOOLS,
) -> tuple[Tool, Path | None]:
    """Return the tool and manifest directory nearest to ``start``.

    Directories are checked from ``start`` upwards. The first directory that
    holds any supported manifest wins; within that directory, ``tools`` order
    decides. Returns ``(Tool.NONE, None)`` when nothing is found.
    """
    order = tuple(tools)
    for directory in ancestors(start):
        for tool in order:
            if fs.is_file(directory.joinpath(*tool.marker)):
                logger.debug("Found %s manifest in %s", tool.value, directory)
                return tool, directory

    logger.debug("No dependency manifest found above %s", start)
    return Tool.NONE, None
