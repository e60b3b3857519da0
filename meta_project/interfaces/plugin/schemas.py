"""Plugin protocol schemas.

Pydantic models for the JSON exchanged with a host CLI. The request
shape is the application's CommandRequest; these models describe the
plugin itself.
"""

from typing import Optional

from pydantic import BaseModel, Field

from meta_project.application import CommandRequest

PluginRequest = CommandRequest


class PluginHelp(BaseModel):
    """Help text the host shows for ``meta project --help``."""

    usage: str
    commands: dict[str, str] = Field(default_factory=dict)
    examples: list[str] = Field(default_factory=list)
    note: Optional[str] = None


class PluginInfo(BaseModel):
    """Answer to ``--meta-plugin-info``."""

    name: str
    version: str
    commands: list[str]
    description: Optional[str] = None
    help: Optional[PluginHelp] = None
