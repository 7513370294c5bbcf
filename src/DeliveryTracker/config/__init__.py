from __future__ import annotations

"""Public configuration API for DeliveryTracker."""

from DeliveryTracker.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from DeliveryTracker.config.menu import MenuConfig
from DeliveryTracker.config.registry import RegistryConfig
from DeliveryTracker.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "RegistryConfig",
    "MenuConfig",
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
