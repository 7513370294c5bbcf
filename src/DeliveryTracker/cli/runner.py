"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation, and error handling
for command execution.
"""

from __future__ import annotations

import click

from DeliveryTracker.cli.commands import MenuSession
from DeliveryTracker.config import AppConfig
from DeliveryTracker.core.registry import PackageRegistry
from DeliveryTracker.utils.log import configure_logging, log


def create_registry(config: AppConfig) -> PackageRegistry:
    """Create the session registry from configuration."""
    return PackageRegistry(reorder_on_lookup=config.registry.reorder_on_lookup)


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_menu(self, action: str) -> None:
        """Run the interactive menu against a fresh registry.

        Args:
            action: The CLI command name (e.g., 'menu').

        Raises:
            click.Abort: When the session fails unexpectedly.
        """
        log_path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path:
            log.debug("Logging to %s", log_path)
        try:
            registry = create_registry(self.config)
            log.debug("Registry created (reorder_on_lookup=%s)", registry.reorder_on_lookup)
            MenuSession(registry=registry, menu=self.config.menu).execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Menu session failed: %s", e)
            raise click.Abort from e
