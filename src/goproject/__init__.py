"""Go project resolution.

Determines, for a Go package on disk, the enclosing project: the directory
versioned as a unit, the dependency manager governing it, and its import
path prefix under the workspace root.
"""

from __future__ import annotations

from .config import ResolverSettings, load_settings
from .core import ProjectResolver
from .models import Project, Tool

__all__ = [
    "Project",
    "ProjectResolver",
    "ResolverSettings",
    "Tool",
    "load_settings",
]
