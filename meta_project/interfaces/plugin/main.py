"""Entry point for the ``meta project`` subprocess plugin."""

import sys
from functools import partial
from typing import TextIO

from meta_project import __version__
from meta_project.application import CommandRequest, CommandResult, execute_command
from meta_project.global_config import get_global_config
from meta_project.interfaces.cli.common import configure_logging, print_missing_repo
from meta_project.interfaces.plugin.runner import run_plugin
from meta_project.interfaces.plugin.schemas import PluginHelp, PluginInfo


def plugin_info() -> PluginInfo:
    """Describe the plugin to the host."""
    return PluginInfo(
        name="project",
        version=__version__,
        commands=[
            "project list",
            "project ls",
            "project check",
            "project sync",
            "project update",
        ],
        description="Project inspection for meta repositories",
        help=PluginHelp(
            usage="meta project <command> [args...]",
            commands={
                "list": "List all projects defined in .meta (alias: ls)",
                "check": "Verify all projects are cloned and consistent",
                "sync": "Plan clones for missing projects (alias: update)",
            },
            examples=[
                "meta project list",
                "meta project list --json",
                "meta project list --recursive",
                "meta project check",
                "meta project sync",
            ],
            note="Clones are executed by the host's command runner",
        ),
    )


def execute(request: CommandRequest, stdout: TextIO) -> CommandResult:
    """Run a request, listing missing projects on ``stdout`` as they are found."""
    config = get_global_config()
    configure_logging(request.options.verbose, config.log_level)
    report = partial(print_missing_repo, file=stdout)
    return execute_command(request, config=config, on_missing=report)


def main() -> None:
    """Serve the plugin protocol and exit with its status."""
    sys.exit(run_plugin(plugin_info(), execute))


if __name__ == "__main__":
    main()
