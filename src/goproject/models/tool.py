"""Dependency manager and version-control identifiers."""

from __future__ import annotations

from enum import Enum


class Tool(str, Enum):
    """Go dependency management tool governing a project."""

    NONE = ""
    GOMODULES = "gomodules"
    DEP = "dep"
    GODEP = "godep"
    GOVENDOR = "govendor"
    GLIDE = "glide"
    VNDR = "vndr"
    GDM = "gdm"

    @property
    def marker(self) -> tuple[str, ...]:
        """Manifest path, relative to the manifest directory, as path parts."""
        if self is Tool.NONE:
            raise ValueError("Tool.NONE has no manifest marker")
        return _LOCKFILE_MARKERS[self]

    @classmethod
    def from_name(cls, name: str) -> Tool:
        try:
            tool = cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown dependency tool: {name!r}") from None
        if tool is cls.NONE:
            raise ValueError("Empty dependency tool name")
        return tool


_LOCKFILE_MARKERS: dict[Tool, tuple[str, ...]] = {
    Tool.GOMODULES: ("go.mod",),
    Tool.DEP: ("Gopkg.toml",),
    Tool.GODEP: ("Godeps", "Godeps.json"),
    Tool.GOVENDOR: ("vendor", "vendor.json"),
    Tool.GLIDE: ("glide.yaml",),
    Tool.VNDR: ("vendor.conf",),
    # gdm keeps a plain file named Godeps, godep a directory of the same name.
    Tool.GDM: ("Godeps",),
}

# Ties between markers found in the same directory go to the earlier tool.
DEFAULT_LOCKFILE_TOOLS: tuple[Tool, ...] = (
    Tool.GOMODULES,
    Tool.DEP,
    Tool.GODEP,
    Tool.GOVENDOR,
    Tool.GLIDE,
    Tool.VNDR,
    Tool.GDM,
)


class VCS(str, Enum):
    """Recognised version-control systems."""

    GIT = "git"
    HG = "hg"
    SVN = "svn"
    BZR = "bzr"

    @property
    def marker(self) -> str:
        return "." + self.value


DEFAULT_VCS_ORDER: tuple[VCS, ...] = (VCS.GIT, VCS.HG, VCS.SVN, VCS.BZR)
