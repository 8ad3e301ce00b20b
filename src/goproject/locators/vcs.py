"""Find the nearest version-control root above a directory."""

from __future__ import annotations

import logging
from pathlib import Path

from ..discovery import LOCAL, Filesystem, ancestors
from ..errors import NoVCSRootError
from ..models.tool import DEFAULT_VCS_ORDER, VCS

logger = logging.getLogger(__name__)


def _has_marker(fs: Filesystem, directory: Path, vcs: VCS) -> bool:
    marker = directory / vcs.marker
    # Git worktrees and submodules use a .git file pointing at the real repo.
    if vcs is VCS.GIT:
        return fs.exists(marker)
    return fs.is_dir(marker)


def nearest_vcs(start: Path, fs: Filesystem = LOCAL) -> tuple[VCS, Path]:
    """Return the VCS kind and root directory nearest to ``start``.

    Raises:
        NoVCSRootError: If no recognised marker exists up to the filesystem root.
    """
    for directory in ancestors(start):
        for vcs in DEFAULT_VCS_ORDER:
            if _has_marker(fs, directory, vcs):
                logger.debug("Found %s root at %s", vcs.value, directory)
                return vcs, directory

    raise NoVCSRootError(start)
