"""Project model: the unit of dependency versioning for a Go package."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .tool import Tool


@dataclass(frozen=True)
class Project:
    """A directory whose packages are versioned together.

    ``manifest`` is the directory holding the tool's manifest, or ``None``
    when no supported tool was found. ``import_path`` is relative to
    ``<workspace_root>/src`` and always uses forward slashes.
    """

    tool: Tool
    manifest: Path | None
    dir: Path
    import_path: str

    def __post_init__(self) -> None:
        if self.tool is Tool.NONE and self.manifest is not None:
            raise ValueError("A project without a tool cannot have a manifest")
        if self.tool is not Tool.NONE and self.manifest is None:
            raise ValueError(f"Project using {self.tool.value} must have a manifest directory")
        if not self.dir.is_absolute():
            raise ValueError(f"Project directory must be absolute: {self.dir}")
        if not self.import_path:
            raise ValueError("Project import path must be non-empty")

    def owns(self, import_path: str) -> bool:
        """Return True when ``import_path`` belongs to this project."""
        if self.import_path == ".":
            return True
        prefix = self.import_path.rstrip("/")
        return import_path == prefix or import_path.startswith(prefix + "/")

    def to_dict(self) -> dict[str, str]:
        return {
            "tool": self.tool.value,
            "manifest": str(self.manifest) if self.manifest is not None else "",
            "dir": str(self.dir),
            "importPath": self.import_path,
        }
