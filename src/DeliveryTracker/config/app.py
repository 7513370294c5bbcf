from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from DeliveryTracker.config.menu import MenuConfig, load_menu
from DeliveryTracker.config.registry import RegistryConfig, load_registry
from DeliveryTracker.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    registry: RegistryConfig
    menu: MenuConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    registry = load_registry(raw)
    menu = load_menu(raw)

    check_runtime(runtime)

    return AppConfig(runtime=runtime, registry=registry, menu=menu)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(
    config_path: Path | None = None,
    default_path: Path = DEFAULT_CONFIG_PATH,
    *,
    defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Optional user override file.
        default_path: Defaults file, the packaged ``default.yml`` unless given.
        defaults_text: Raw defaults YAML that replaces ``default_path``.

    Returns:
        Parsed application config.
    """
    if defaults_text is None:
        defaults_text = default_path.read_text(encoding="utf-8")
    base = parse_yaml(defaults_text)
    if config_path is None or config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
