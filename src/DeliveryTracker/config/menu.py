"""Interactive menu configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DeliveryTracker.config.common import expect_bool, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class MenuConfig:
    """Menu display settings."""

    show_banner: bool = True
    list_after_sort: bool = True


def load_menu(raw: Mapping[str, Any]) -> MenuConfig:
    """Load menu config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed menu configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "menu", required=False)
    return MenuConfig(
        show_banner=expect_bool(get_optional_value(section, "show_banner", True), "menu.show_banner"),
        list_after_sort=expect_bool(
            get_optional_value(section, "list_after_sort", True),
            "menu.list_after_sort",
        ),
    )
