"""Command implementations for DeliveryTracker CLI.

Encapsulates the interactive menu, separated from CLI parameter handling.
All prompting and printing happens here; the registry never does I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final

import click

from DeliveryTracker.config import MenuConfig
from DeliveryTracker.core.errors import PackageValidationError
from DeliveryTracker.core.models import PackageRecord
from DeliveryTracker.core.registry import PackageRegistry
from DeliveryTracker.renderers.console import render_lookup, render_packages
from DeliveryTracker.utils.log import log

BANNER: Final = "\n".join(
    [
        "===============================",
        " Welcome to Delivery Dilemmas!",
        "===============================",
    ]
)

MENU_OPTIONS: Final = (
    "1. Add a new package",
    "2. Display all packages and shipping costs",
    "3. Sort packages by weight",
    "4. Search for a package by Tracking ID",
    "5. Exit",
)

EXIT_CHOICE: Final = "5"


@dataclass(slots=True)
class MenuSession:
    """Numbered text menu driving one PackageRegistry.

    Attributes:
        registry: Registry owned by this session.
        menu: Menu display settings.
    """

    registry: PackageRegistry
    menu: MenuConfig = MenuConfig()

    def execute(self) -> None:
        """Run the menu loop until the user exits or input ends."""
        handlers: dict[str, Callable[[], None]] = {
            "1": self.add_package,
            "2": self.display_packages,
            "3": self.sort_packages,
            "4": self.search_package,
        }
        while True:
            self._show_menu()
            try:
                choice = click.prompt("Enter your choice", type=str).strip()
            except click.Abort:
                # end of input
                click.echo()
                choice = EXIT_CHOICE

            if choice == EXIT_CHOICE:
                click.echo("Thank you for using Delivery Dilemmas!")
                log.info("Session ended with %d packages", len(self.registry))
                return

            handler = handlers.get(choice)
            if handler is None:
                click.echo("Invalid choice! Please try again.")
                continue
            try:
                handler()
            except click.Abort:
                click.echo()
                click.echo("Thank you for using Delivery Dilemmas!")
                return

    def add_package(self) -> None:
        tier = click.prompt("Enter package type (Standard/Express)", type=str)
        tracking_id = click.prompt("Enter tracking ID", type=str)
        destination = click.prompt("Enter destination", type=str)
        weight = click.prompt("Enter weight", type=float)
        try:
            record = PackageRecord.create(tracking_id, destination, weight, tier)
        except PackageValidationError as e:
            log.info("Rejected package %r: %s", tracking_id, e)
            click.echo(f"Error: {e}")
            return
        self.registry.add(record)
        click.echo("Package added successfully!")

    def display_packages(self) -> None:
        click.echo(render_packages(self.registry.list_all()), nl=False)

    def sort_packages(self) -> None:
        click.echo("Sorting packages by weight...")
        self.registry.sort_by_weight()
        if self.menu.list_after_sort:
            self.display_packages()

    def search_package(self) -> None:
        tracking_id = click.prompt("Enter Tracking ID", type=str).strip()
        click.echo(render_lookup(self.registry.find_by_tracking_id(tracking_id)))

    def _show_menu(self) -> None:
        if self.menu.show_banner:
            click.echo(BANNER)
        for option in MENU_OPTIONS:
            click.echo(option)
