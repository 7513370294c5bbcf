from __future__ import annotations

"""Registry domain configuration."""

from dataclasses import dataclass
from typing import Any, Mapping

from DeliveryTracker.config.common import expect_bool, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Registry behaviour settings.

    Attributes:
        reorder_on_lookup: Leave the stored packages ordered by tracking ID
            after each lookup instead of searching a working copy.
    """

    reorder_on_lookup: bool = False


def load_registry(raw: Mapping[str, Any]) -> RegistryConfig:
    """Load registry domain config from raw mapping."""
    section = get_section(raw, "registry", required=False)
    return RegistryConfig(
        reorder_on_lookup=expect_bool(
            get_optional_value(section, "reorder_on_lookup", False),
            "registry.reorder_on_lookup",
        ),
    )
