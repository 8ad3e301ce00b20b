"""Test configuration helpers and fixtures."""

from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from goproject.config import ResolverSettings  # noqa: E402
from goproject.discovery import LocalFilesystem  # noqa: E402


class CountingFilesystem(LocalFilesystem):
    """Local filesystem that records every existence check."""

    def __init__(self) -> None:
        self.calls: Counter[str] = Counter()

    @property
    def total(self) -> int:
        return sum(self.calls.values())

    def exists(self, path: Path) -> bool:
        self.calls["exists"] += 1
        return super().exists(path)

    def is_file(self, path: Path) -> bool:
        self.calls["is_file"] += 1
        return super().is_file(path)

    def is_dir(self, path: Path) -> bool:
        self.calls["is_dir"] += 1
        return super().is_dir(path)


def make_tree(root: Path, *entries: str) -> None:
    """Create directories (trailing ``/``) and empty files under ``root``."""
    for entry in entries:
        target = root / entry
        if entry.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("", encoding="utf-8")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "ws"
    (root / "src").mkdir(parents=True)
    return root


@pytest.fixture
def settings(workspace: Path) -> ResolverSettings:
    return ResolverSettings(workspace_root=workspace)


@pytest.fixture
def counting_fs() -> CountingFilesystem:
    return CountingFilesystem()
