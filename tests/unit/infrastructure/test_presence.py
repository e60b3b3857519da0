from __future__ import annotations

from pathlib import Path

from meta_project.domain.workspace import MissingProject, ProjectRecord
from meta_project.infrastructure.workspace import find_missing_recursive, reconcile


def test_reconcile_partitions_declared_projects(tmp_path: Path) -> None:
    declared = [
        ProjectRecord(path="here", repo="git@x:here.git"),
        ProjectRecord(path="gone", repo="git@x:gone.git"),
        ProjectRecord(path="local", repo=None),
        ProjectRecord(path="here-no-url"),
        ProjectRecord(path="nested/gone", repo="git@x:nested.git"),
    ]
    (tmp_path / "here").mkdir()
    (tmp_path / "here-no-url").mkdir()

    outcome = reconcile(declared, tmp_path)

    assert [r.path for r in outcome.present] == ["here", "here-no-url"]
    assert outcome.missing == [
        MissingProject(path="gone", repo="git@x:gone.git"),
        MissingProject(path="nested/gone", repo="git@x:nested.git"),
    ]
    assert [r.path for r in outcome.excluded] == ["local"]

    buckets = [r.path for r in outcome.present] + [m.path for m in outcome.missing] + [
        r.path for r in outcome.excluded
    ]
    assert sorted(buckets) == sorted(r.path for r in declared)


def test_a_file_is_not_a_present_project(tmp_path: Path) -> None:
    (tmp_path / "api").write_text("not a directory", encoding="utf-8")

    outcome = reconcile([ProjectRecord(path="api", repo="git@x:api.git")], tmp_path)

    assert outcome.present == []
    assert [m.path for m in outcome.missing] == ["api"]


def test_find_missing_recursive_prefixes_nested_paths(tmp_path: Path, write_manifest) -> None:
    write_manifest(tmp_path, {"root-gone": "git@x:rg.git", "child": "git@x:child.git"})
    write_manifest(tmp_path / "child", {"grandchild": "git@x:gc.git", "there": "git@x:t.git"})
    (tmp_path / "child" / "there").mkdir()

    missing = find_missing_recursive(tmp_path, ["child", "not-a-workspace"])

    assert missing == [
        MissingProject(path="root-gone", repo="git@x:rg.git"),
        MissingProject(path="child/grandchild", repo="git@x:gc.git"),
    ]


def test_find_missing_recursive_skips_broken_manifests(tmp_path: Path, write_manifest) -> None:
    write_manifest(tmp_path, {"child": "git@x:child.git"})
    (tmp_path / "child").mkdir()
    (tmp_path / "child" / ".meta").write_text('{"projects": 1}', encoding="utf-8")

    assert find_missing_recursive(tmp_path, ["child"]) == []
