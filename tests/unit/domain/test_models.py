from __future__ import annotations

import pytest
from pydantic import ValidationError

from meta_project.domain.workspace import (
    ExecutionPlan,
    PlannedCommand,
    PlanResponse,
    ProjectRecord,
    TreeNode,
    validate_project_path,
)


@pytest.mark.parametrize("path", ["api", "services/api", "libs/core/", "a.b-c_d"])
def test_relative_paths_are_accepted(path: str) -> None:
    assert validate_project_path(path) == path.rstrip("/")


@pytest.mark.parametrize("path", ["", "  ", " api", "api\t", ".", "..", "../outside", "a/../../b", "/etc", "C:\\repo", "a\\..\\b"])
def test_escaping_or_empty_paths_are_rejected(path: str) -> None:
    with pytest.raises(ValueError):
        validate_project_path(path)


def test_project_record_rejects_traversal() -> None:
    with pytest.raises(ValidationError):
        ProjectRecord(path="../sibling", repo="https://x/s.git")


def test_project_record_is_immutable() -> None:
    record = ProjectRecord(path="api", repo="https://x/api.git")
    with pytest.raises(ValidationError):
        record.repo = "https://x/other.git"  # type: ignore[misc]


def test_tree_node_from_record_derives_name_and_full_path() -> None:
    record = ProjectRecord(path="services/api", repo="git@x:api.git", tags=["backend"])

    top = TreeNode.from_record(record)
    nested = TreeNode.from_record(record, parent_path="platform", is_meta=True)

    assert (top.name, top.path) == ("api", "services/api")
    assert (nested.name, nested.path) == ("api", "platform/services/api")
    assert nested.is_meta is True
    assert nested.tags == ["backend"]
    assert nested.children == []


def test_plan_response_omits_absent_optional_fields() -> None:
    plan = ExecutionPlan(commands=[PlannedCommand(dir=".", cmd="git clone a b")])

    wire = PlanResponse(plan=plan).to_wire()

    assert wire == {"plan": {"commands": [{"dir": ".", "cmd": "git clone a b"}], "parallel": False}}


def test_plan_response_keeps_env_and_bound() -> None:
    plan = ExecutionPlan(
        commands=[PlannedCommand(dir=".", cmd="git clone a b", env={"GIT_TERMINAL_PROMPT": "0"})],
        parallel=True,
        max_parallel=4,
    )

    wire = PlanResponse(plan=plan).to_wire()

    assert wire["plan"]["commands"][0]["env"] == {"GIT_TERMINAL_PROMPT": "0"}
    assert wire["plan"]["parallel"] is True
    assert wire["plan"]["max_parallel"] == 4


def test_empty_plan_signals_nothing_to_do() -> None:
    assert ExecutionPlan().is_empty
    assert not ExecutionPlan(commands=[PlannedCommand(dir=".", cmd="true")]).is_empty
