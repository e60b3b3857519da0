"""Entry point for the meta-project CLI.

Usage:
    python -m meta_project.interfaces.cli.main

Or via installed entry point:
    meta-project <command>
"""

from meta_project.interfaces.cli import app


def main() -> None:
    """Run the meta-project CLI application."""
    app()


if __name__ == "__main__":
    main()
