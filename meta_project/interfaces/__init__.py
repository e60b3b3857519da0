"""Interfaces layer for meta-project.

Adapters for external interactions:
- CLI: Command-line interface using Typer
- Plugin: JSON request/response over stdin/stdout for a host CLI

Both accept input, call the command service, and format its result.
"""
