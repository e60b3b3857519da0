"""Global configuration CLI commands."""

import json
from typing import Any

import typer
from pydantic import ValidationError

from meta_project.global_config import GlobalConfig, get_config_dir, get_global_config, save_global_config
from meta_project.interfaces.cli.common import print_error, print_success

app = typer.Typer(help="Global configuration commands")


@app.command("show")
def show() -> None:
    """Show the effective global configuration."""
    typer.echo(json.dumps(get_global_config().model_dump(), indent=2))


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Setting name, e.g. clone_command"),
    value: str = typer.Argument(..., help="New value ('none' clears max_parallel)"),
) -> None:
    """Change one setting and save it.

    Example:
        meta-project config set clone_command "git clone --depth 1 {url} {target}"
    """
    if key not in GlobalConfig.model_fields:
        print_error(f"Unknown setting '{key}'. Valid: {', '.join(GlobalConfig.model_fields)}")
        raise typer.Exit(1)

    data: dict[str, Any] = get_global_config().model_dump()
    data[key] = None if key == "max_parallel" and value.lower() == "none" else value
    try:
        config = GlobalConfig(**data)
    except ValidationError as e:
        print_error(f"Invalid value for {key}: {e.errors()[0]['msg']}")
        raise typer.Exit(1)

    save_global_config(config)
    print_success(f"Saved {key} to {get_config_dir() / 'config.json'}")
