"""Filesystem existence checks and upward directory walks."""

from __future__ import annotations

import errno
import os
import stat
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol


# A missing path (or a path through a regular file) is a plain "no".
_MISSING = {errno.ENOENT, errno.ENOTDIR}


class Filesystem(Protocol):
    """Read-only existence predicates used by the locators."""

    def exists(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...


class LocalFilesystem:
    """Existence checks against the local disk.

    Unlike :meth:`pathlib.Path.exists`, only "no such file" style errors are
    reported as ``False``; permission and I/O errors propagate.
    """

    def _mode(self, path: Path) -> int | None:
        try:
            return os.stat(path).st_mode
        except OSError as exc:
            if exc.errno in _MISSING:
                return None
            raise

    def exists(self, path: Path) -> bool:
        return self._mode(path) is not None

    def is_file(self, path: Path) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISREG(mode)

    def is_dir(self, path: Path) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISDIR(mode)


LOCAL = LocalFilesystem()


def ancestors(start: Path) -> Iterator[Path]:
    """Yield ``start`` and then each of its parents up to the filesystem root."""
    yield start
    yield from start.parents
