"""Data models for project resolution."""

from __future__ import annotations

from .project import Project
from .tool import DEFAULT_LOCKFILE_TOOLS, DEFAULT_VCS_ORDER, VCS, Tool

__all__ = [
    "DEFAULT_LOCKFILE_TOOLS",
    "DEFAULT_VCS_ORDER",
    "Project",
    "Tool",
    "VCS",
]
