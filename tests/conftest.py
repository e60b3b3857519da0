from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

ManifestWriter = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path_factory.mktemp("config-home")
    monkeypatch.setenv("META_PROJECT_HOME", str(home))
    monkeypatch.delenv("META_PROJECT_CWD", raising=False)
    return home


@pytest.fixture
def write_manifest() -> ManifestWriter:
    def _write(directory: Path, projects: Any, filename: str = ".meta") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(json.dumps({"projects": projects}), encoding="utf-8")
        return path

    return _write
