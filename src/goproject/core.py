"""Project resolution entrypoints.

A project is the directory whose packages are versioned together. For a Go
package it is found from two upward searches:

1. The nearest lockfile, used to resolve dependency versions.
2. The nearest VCS root, used to decide which unresolved imports are
   first-party. Vendored packages are instead attributed to the project that
   vendors them, as long as that project lies inside the repository.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from pathlib import Path

from .config import ResolverSettings
from .discovery import LOCAL, Filesystem
from .errors import (
    InconsistentBoundaryError,
    NoVCSRootError,
    NoWorkspaceRootError,
    PackageNotFoundError,
    PathComputationError,
)
from .locators import nearest_lockfile, nearest_vcs, vendor_parent
from .models import Project

logger = logging.getLogger(__name__)

PackageDirResolver = Callable[[str], Path]


def select_project_dir(vcs_root: Path, parent: Path, package: str | None = None) -> Path:
    """Choose between the VCS root and the vendor parent.

    The vendor parent wins only when it lies strictly inside the VCS root.
    """
    if parent != vcs_root and parent.is_relative_to(vcs_root):
        return parent
    if vcs_root.is_relative_to(parent):
        return vcs_root
    raise InconsistentBoundaryError(vcs_root, parent, package)


def compute_import_path(project_dir: Path, workspace_root: Path, package: str | None = None) -> str:
    """Return ``project_dir`` relative to ``<workspace_root>/src`` with forward slashes."""
    try:
        relative = project_dir.relative_to(workspace_root / "src")
    except ValueError:
        raise PathComputationError(project_dir, workspace_root, package) from None
    return relative.as_posix()


class ProjectResolver:
    """Resolve and memoize the project of each package.

    One resolver is meant to live for one analysis run. Its cache is never
    invalidated and is safe to share between threads: lookups and inserts
    hold a lock, resolution itself does not, so concurrent misses on the
    same package may both compute the (identical) project.
    """

    def __init__(
        self,
        settings: ResolverSettings,
        package_dir: PackageDirResolver | None = None,
        fs: Filesystem = LOCAL,
    ) -> None:
        self.settings = settings
        self.fs = fs
        self._package_dir = package_dir or self._workspace_package_dir
        self._cache: dict[str, Project] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def cached(self, package: str) -> Project | None:
        with self._lock:
            return self._cache.get(package)

    def _workspace_root(self, package: str) -> Path:
        root = self.settings.workspace_root
        if root is None:
            raise NoWorkspaceRootError(package)
        return root

    def _workspace_package_dir(self, package: str) -> Path:
        directory = self._workspace_root(package) / "src" / package
        if not self.fs.is_dir(directory):
            raise PackageNotFoundError(package, directory)
        return directory

    def resolve(self, package: str) -> Project:
        """Return the project containing the package with import path ``package``.

        Raises:
            NoWorkspaceRootError: If no workspace root is configured.
            NoVCSRootError: If the package is not inside a VCS repository.
            PathComputationError: If the project is outside the workspace.
            InconsistentBoundaryError: If the VCS root and vendor parent are unrelated.
        """
        cached = self.cached(package)
        if cached is not None:
            logger.debug("Project cache hit for %s", package)
            return cached

        workspace_root = self._workspace_root(package)
        directory = self._package_dir(package)

        tool, manifest_dir = nearest_lockfile(directory, self.fs, self.settings.lockfile_tools)
        try:
            _, repo_root = nearest_vcs(directory, self.fs)
        except NoVCSRootError as exc:
            raise NoVCSRootError(exc.directory, package) from None

        project_dir = repo_root
        parent = vendor_parent(directory, self.fs)
        if parent != directory:
            project_dir = select_project_dir(repo_root, parent, package)
        import_path = compute_import_path(project_dir, workspace_root, package)

        project = Project(
            tool=tool,
            manifest=manifest_dir,
            dir=project_dir,
            import_path=import_path,
        )
        with self._lock:
            project = self._cache.setdefault(package, project)
        logger.info("Resolved %s to project %s (%s)", package, import_path, tool.value or "no tool")
        return project

    def group(self, packages: Iterable[str]) -> dict[Project, list[str]]:
        """Resolve each package and group them by project, in input order."""
        by_project: dict[Project, list[str]] = {}
        for package in packages:
            by_project.setdefault(self.resolve(package), []).append(package)
        return by_project
