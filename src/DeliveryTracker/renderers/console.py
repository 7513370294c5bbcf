"""Console text output renderers.

Renders package records into the human-friendly lines shown by the menu.
"""

from __future__ import annotations

from typing import Iterable

from DeliveryTracker.core.models import PackageRecord

EMPTY_MESSAGE = "No packages available."
NOT_FOUND_MESSAGE = "No package found with the given Tracking ID."


def render_record(record: PackageRecord) -> str:
    return record.describe()


def render_packages(records: Iterable[PackageRecord]) -> str:
    """Render records one per line.

    Args:
        records: Records in display order.

    Returns:
        A formatted block ending with a newline, or the empty-registry
        message when there is nothing to show.
    """
    lines = [render_record(record) for record in records]
    if not lines:
        return EMPTY_MESSAGE + "\n"
    return "\n".join(lines) + "\n"


def render_lookup(record: PackageRecord | None) -> str:
    if record is None:
        return NOT_FOUND_MESSAGE
    return f"Package Found: {render_record(record)}"
