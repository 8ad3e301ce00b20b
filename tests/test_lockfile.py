from __future__ import annotations

from pathlib import Path

from conftest import make_tree

from goproject.locators import nearest_lockfile
from goproject.models import Tool


def test_manifest_in_start_directory(tmp_path: Path) -> None:
    make_tree(tmp_path, "proj/Gopkg.toml")

    assert nearest_lockfile(tmp_path / "proj") == (Tool.DEP, tmp_path / "proj")


def test_nearest_ancestor_wins_over_farther_one(tmp_path: Path) -> None:
    make_tree(
        tmp_path,
        "repo/go.mod",
        "repo/svc/glide.yaml",
        "repo/svc/pkg/a/b/",
    )

    tool, manifest_dir = nearest_lockfile(tmp_path / "repo/svc/pkg/a/b")

    assert tool is Tool.GLIDE
    assert manifest_dir == tmp_path / "repo/svc"


def test_priority_breaks_ties_within_one_directory(tmp_path: Path) -> None:
    make_tree(tmp_path, "proj/glide.yaml", "proj/Gopkg.toml", "proj/Godeps/Godeps.json")

    assert nearest_lockfile(tmp_path / "proj")[0] is Tool.DEP
    assert nearest_lockfile(tmp_path / "proj", tools=[Tool.GLIDE, Tool.DEP])[0] is Tool.GLIDE


def test_nested_markers(tmp_path: Path) -> None:
    make_tree(tmp_path, "a/Godeps/Godeps.json", "b/vendor/vendor.json", "c/Godeps")

    assert nearest_lockfile(tmp_path / "a")[0] is Tool.GODEP
    assert nearest_lockfile(tmp_path / "b")[0] is Tool.GOVENDOR
    assert nearest_lockfile(tmp_path / "c")[0] is Tool.GDM


def test_directory_named_like_manifest_is_ignored(tmp_path: Path) -> None:
    make_tree(tmp_path, "proj/go.mod/", "proj/pkg/")

    assert nearest_lockfile(tmp_path / "proj/pkg", tools=[Tool.GOMODULES]) == (Tool.NONE, None)


def test_missing_manifest_is_not_an_error(tmp_path: Path) -> None:
    make_tree(tmp_path, "empty/pkg/")

    assert nearest_lockfile(tmp_path / "empty/pkg", tools=[Tool.VNDR]) == (Tool.NONE, None)
