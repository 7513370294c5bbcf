"""Text renderers for menu output."""

from __future__ import annotations

from DeliveryTracker.renderers.console import (
    EMPTY_MESSAGE,
    NOT_FOUND_MESSAGE,
    render_lookup,
    render_packages,
    render_record,
)

__all__ = [
    "EMPTY_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "render_lookup",
    "render_packages",
    "render_record",
]
