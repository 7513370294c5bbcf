"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from DeliveryTracker.cli.runner import CommandRunner
from DeliveryTracker.config import load_config_with_defaults


@click.group(
    help="DeliveryTracker: track packages in an interactive menu.",
    invoke_without_command=True,
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Path to YAML config file merged over the packaged defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    Runs the menu when no subcommand is given.

    Args:
        ctx: Click context.
        config_path: Optional path to YAML override file.
    """
    load_dotenv()

    ctx.obj = load_config_with_defaults(config_path)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu_cmd)


@cli.command("menu")
@click.pass_context
def menu_cmd(ctx: click.Context) -> None:
    """Start the interactive package menu.

    Raises:
        click.Abort: When the session fails.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_menu(action="menu")
