"""Plugin transport over stdin/stdout.

The host runs the plugin executable with one of two flags:

    --meta-plugin-info   print PluginInfo as JSON
    --meta-plugin-exec   read a PluginRequest JSON document from stdin,
                         execute it and write the result

Results are written as: Message -> text, Payload -> JSON, PlanResult ->
``{"plan": {...}}`` JSON, Failure -> ``Error: ...`` on stderr with exit 1.
"""

import json
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from pydantic import ValidationError

from meta_project.application import CommandResult, Failure, Message, Payload, PlanResult
from meta_project.domain.workspace import PlanResponse
from meta_project.interfaces.plugin.schemas import PluginInfo, PluginRequest

logger = logging.getLogger(__name__)

INFO_FLAG = "--meta-plugin-info"
EXEC_FLAG = "--meta-plugin-exec"

Executor = Callable[[PluginRequest, TextIO], CommandResult]


def run_plugin(
    info: PluginInfo,
    execute: Executor,
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Serve one host invocation.

    Args:
        info: Plugin description for ``--meta-plugin-info``.
        execute: Handles a parsed request. Receives the output stream so
            progress lines land next to the result.
        argv: Arguments without the program name. Defaults to sys.argv.
        stdin, stdout, stderr: Streams, defaulting to the process streams.

    Returns:
        Process exit code.
    """
    argv = sys.argv[1:] if argv is None else argv
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if INFO_FLAG in argv:
        stdout.write(info.model_dump_json(exclude_none=True) + "\n")
        return 0

    if EXEC_FLAG not in argv:
        stderr.write(f"Usage: {info.name} {INFO_FLAG} | {EXEC_FLAG} < request.json\n")
        return 2

    try:
        request = PluginRequest.model_validate_json(stdin.read())
    except ValidationError as e:
        stderr.write(f"Error: invalid plugin request: {e}\n")
        return 1

    logger.debug(f"Plugin request: {request.command} in {request.cwd or '.'}")
    return write_result(execute(request, stdout), stdout, stderr)


def write_result(result: CommandResult, stdout: TextIO, stderr: TextIO) -> int:
    """Write a command result in protocol form and return the exit code."""
    if isinstance(result, Failure):
        stderr.write(f"Error: {result.error}\n")
        return 1

    if isinstance(result, Message):
        stdout.write(result.text + "\n")
    elif isinstance(result, Payload):
        stdout.write(json.dumps(result.data, indent=2) + "\n")
    elif isinstance(result, PlanResult):
        stdout.write(json.dumps(PlanResponse(plan=result.plan).to_wire()) + "\n")
    return 0
