"""Subprocess plugin interface for a host ``meta`` CLI."""

from meta_project.interfaces.plugin.runner import run_plugin, write_result
from meta_project.interfaces.plugin.schemas import PluginHelp, PluginInfo, PluginRequest

__all__ = ["run_plugin", "write_result", "PluginInfo", "PluginHelp", "PluginRequest"]
