from __future__ import annotations

import io
import json
from pathlib import Path

from meta_project.interfaces.plugin import run_plugin
from meta_project.interfaces.plugin.main import execute, plugin_info


def _exec(request: dict) -> tuple[int, str, str]:
    stdout, stderr = io.StringIO(), io.StringIO()
    code = run_plugin(
        plugin_info(),
        execute,
        argv=["--meta-plugin-exec"],
        stdin=io.StringIO(json.dumps(request)),
        stdout=stdout,
        stderr=stderr,
    )
    return code, stdout.getvalue(), stderr.getvalue()


def test_info_describes_commands() -> None:
    stdout = io.StringIO()

    code = run_plugin(plugin_info(), execute, argv=["--meta-plugin-info"], stdout=stdout)

    info = json.loads(stdout.getvalue())
    assert code == 0
    assert info["name"] == "project"
    assert "project check" in info["commands"]
    assert info["help"]["usage"].startswith("meta project")


def test_exec_sync_writes_plan(tmp_path: Path, write_manifest) -> None:
    write_manifest(tmp_path, {"alpha": "https://x/a.git", "beta": "https://x/b.git"})

    code, out, _err = _exec({"command": "project sync", "cwd": str(tmp_path)})

    assert code == 0
    plan = json.loads(out)["plan"]
    assert [c["cmd"].split()[2] for c in plan["commands"]] == ["https://x/a.git", "https://x/b.git"]
    assert plan["parallel"] is False


def test_exec_list_with_options(tmp_path: Path, write_manifest) -> None:
    write_manifest(tmp_path, {"child": "git@x:child.git"})
    write_manifest(tmp_path / "child", {"grandchild": "git@x:gc.git"})

    code, out, _err = _exec(
        {
            "command": "project list",
            "args": [],
            "options": {"json_output": True, "recursive": True, "depth": None},
            "cwd": str(tmp_path),
            "projects": [],
        }
    )

    assert code == 0
    data = json.loads(out)
    assert data["projects"][0]["is_meta"] is True
    assert data["projects"][0]["projects"][0]["name"] == "grandchild"


def test_exec_error_goes_to_stderr(tmp_path: Path) -> None:
    code, out, err = _exec({"command": "project check", "cwd": str(tmp_path)})

    assert code == 1
    assert out == ""
    assert err.startswith("Error: no manifest found at")


def test_exec_rejects_malformed_request() -> None:
    stderr = io.StringIO()

    code = run_plugin(
        plugin_info(),
        execute,
        argv=["--meta-plugin-exec"],
        stdin=io.StringIO("{not json"),
        stdout=io.StringIO(),
        stderr=stderr,
    )

    assert code == 1
    assert "invalid plugin request" in stderr.getvalue()


def test_without_flag_prints_usage() -> None:
    stderr = io.StringIO()

    code = run_plugin(plugin_info(), execute, argv=[], stderr=stderr)

    assert code == 2
    assert "--meta-plugin-exec" in stderr.getvalue()


def test_exec_check_reports_missing_on_given_stream(tmp_path: Path, write_manifest, capsys) -> None:
    write_manifest(tmp_path, {"alpha": "https://x/a.git"})

    code, out, _err = _exec({"command": "project check", "cwd": str(tmp_path)})

    assert code == 0
    lines = out.splitlines()
    assert lines[0] == f"✗ alpha https://x/a.git -> {tmp_path / 'alpha'}"
    assert lines[1] == "1 project(s) missing"
    assert capsys.readouterr().out == ""


def test_exec_configures_logging_from_request(tmp_path: Path, write_manifest, monkeypatch) -> None:
    write_manifest(tmp_path, {})
    calls: list[tuple[bool, str]] = []
    monkeypatch.setattr(
        "meta_project.interfaces.plugin.main.configure_logging",
        lambda verbose, level: calls.append((verbose, level)),
    )

    code, _out, _err = _exec(
        {"command": "project list", "options": {"verbose": True}, "cwd": str(tmp_path)}
    )

    assert code == 0
    assert calls == [(True, "WARNING")]
