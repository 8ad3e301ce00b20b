"""Errors raised while resolving the project of a package."""

from __future__ import annotations

from pathlib import Path


class ProjectError(RuntimeError):
    """Base class for project resolution failures."""


class ConfigError(ProjectError):
    """Raised when resolver configuration cannot be loaded or is invalid."""


class NoWorkspaceRootError(ConfigError):
    """Raised when no workspace root is configured."""

    def __init__(self, package: str | None = None) -> None:
        self.package = package
        suffix = f" (resolving {package})" if package else ""
        super().__init__(f"No workspace root configured; set workspace_root or $GOPATH{suffix}")


class NoVCSRootError(ProjectError):
    """Raised when no version-control root exists above a package directory."""

    def __init__(self, directory: Path, package: str | None = None) -> None:
        self.directory = directory
        self.package = package
        subject = f"package {package} at {directory}" if package else str(directory)
        super().__init__(f"Could not find a VCS root above {subject}")


class PathComputationError(ProjectError):
    """Raised when a project root lies outside ``<workspace_root>/src``."""

    def __init__(self, directory: Path, workspace_root: Path, package: str | None = None) -> None:
        self.directory = directory
        self.workspace_root = workspace_root
        self.package = package
        super().__init__(
            f"Project root {directory} is not beneath {workspace_root / 'src'}"
            + (f" (resolving {package})" if package else "")
        )


class InconsistentBoundaryError(ProjectError):
    """Raised when the VCS root and vendor parent are unrelated directories."""

    def __init__(self, vcs_root: Path, vendor_parent: Path, package: str | None = None) -> None:
        self.vcs_root = vcs_root
        self.vendor_parent = vendor_parent
        self.package = package
        super().__init__(
            f"VCS root {vcs_root} and vendor parent {vendor_parent} are unrelated"
            + (f" (resolving {package})" if package else "")
        )


class PackageNotFoundError(ProjectError):
    """Raised when a package import path has no directory in the workspace."""

    def __init__(self, package: str, directory: Path) -> None:
        self.package = package
        self.directory = directory
        super().__init__(f"Package {package} not found at {directory}")
