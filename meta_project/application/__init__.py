"""Application layer for meta-project.

Orchestrates domain functions and infrastructure into the operations the
CLI and plugin expose.

Services:
    command_service - Dispatch of project list / check / sync
    plan_service - Clone plan construction
"""

from meta_project.application.command_service import (
    CommandRequest,
    CommandResult,
    ExecuteOptions,
    Failure,
    Message,
    Payload,
    PlanResult,
    execute_command,
    get_help_text,
)
from meta_project.application.plan_service import build_plan, clone_command

__all__ = [
    "CommandRequest",
    "CommandResult",
    "ExecuteOptions",
    "Failure",
    "Message",
    "Payload",
    "PlanResult",
    "execute_command",
    "get_help_text",
    "build_plan",
    "clone_command",
]
