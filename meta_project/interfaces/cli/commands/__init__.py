"""CLI command groups for meta-project.

Command groups:
- project: Workspace inspection (list, check, sync)
- config: Global configuration (show, set)

Each command group is a Typer app that gets registered
with the main app using app.add_typer().
"""

from meta_project.interfaces.cli.commands import config, project

__all__ = ["project", "config"]
