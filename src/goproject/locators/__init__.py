"""Upward searches that bound a package's project."""

from __future__ import annotations

from .lockfile import nearest_lockfile
from .vcs import nearest_vcs
from .vendor import vendor_parent

__all__ = [
    "nearest_lockfile",
    "nearest_vcs",
    "vendor_parent",
]
