from __future__ import annotations

from pathlib import Path

from meta_project.infrastructure.manifest import ManifestFormat, find_manifest


def test_no_manifest_is_not_an_error(tmp_path: Path) -> None:
    assert find_manifest(tmp_path) is None
    assert find_manifest(tmp_path / "does-not-exist") is None


def test_priority_order_prefers_plain_meta(tmp_path: Path) -> None:
    (tmp_path / ".meta.yaml").write_text("projects: {}\n", encoding="utf-8")
    (tmp_path / ".meta").write_text('{"projects": {}}', encoding="utf-8")

    location = find_manifest(tmp_path)

    assert location is not None
    assert location.path == tmp_path / ".meta"
    assert location.format is ManifestFormat.JSON
    assert location.directory == tmp_path


def test_yaml_manifest_is_recognized(tmp_path: Path) -> None:
    (tmp_path / ".meta.yml").write_text("projects: {}\n", encoding="utf-8")

    location = find_manifest(tmp_path)

    assert location is not None
    assert location.format is ManifestFormat.YAML


def test_directory_named_like_manifest_is_ignored(tmp_path: Path) -> None:
    (tmp_path / ".meta").mkdir()

    assert find_manifest(tmp_path) is None
