"""CLI package for DeliveryTracker command orchestration.

Contains the click group, the command runner, and the interactive menu.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "MenuSession", "cli", "main"]

from DeliveryTracker.cli.commands import MenuSession
from DeliveryTracker.cli.runner import CommandRunner
from DeliveryTracker.cli.ui import cli


def main() -> None:
    """Run DeliveryTracker CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
