"""In-memory package registry.

Holds records in insertion order and offers the two algorithms the menu
needs: an in-place weight sort and a binary-search lookup by tracking ID.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from DeliveryTracker.core.models import PackageRecord
from DeliveryTracker.utils.log import log


@dataclass(slots=True)
class PackageRegistry:
    """Ordered collection of package records for the lifetime of a session.

    Attributes:
        reorder_on_lookup: When true, a lookup leaves the stored sequence
            ordered by tracking ID instead of searching a working copy.
    """

    reorder_on_lookup: bool = False
    _packages: list[PackageRecord] = field(default_factory=list, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._packages)

    def __iter__(self) -> Iterator[PackageRecord]:
        return iter(list(self._packages))

    def add(self, record: PackageRecord) -> None:
        """Append a record. Duplicate tracking IDs are accepted."""
        self._packages.append(record)
        log.debug("Added package %s (total=%d)", record.tracking_id, len(self._packages))

    def list_all(self) -> list[PackageRecord]:
        """Return a snapshot of the records in their current order."""
        return list(self._packages)

    def sort_by_weight(self) -> None:
        """Sort records in place by non-decreasing weight.

        Adjacent exchange sort: only out-of-order neighbours are swapped, so
        records of equal weight keep their relative order. Stops after the
        first pass without swaps.
        """
        packages = self._packages
        n = len(packages)
        swaps = 0
        for i in range(n - 1):
            swapped = False
            for j in range(n - i - 1):
                if packages[j].weight > packages[j + 1].weight:
                    packages[j], packages[j + 1] = packages[j + 1], packages[j]
                    swapped = True
                    swaps += 1
            if not swapped:
                break
        log.debug("Sorted %d packages by weight (%d swaps)", n, swaps)

    def find_by_tracking_id(self, tracking_id: str) -> PackageRecord | None:
        """Look up a record by tracking ID.

        The candidates are ordered lexicographically by tracking ID and then
        binary-searched. With duplicate IDs any one of them may be returned.

        Args:
            tracking_id: Exact tracking ID to find.

        Returns:
            The matching record, or None when nothing matches.
        """
        ordered = sorted(self._packages, key=lambda p: p.tracking_id)
        if self.reorder_on_lookup:
            self._packages[:] = ordered

        low, high = 0, len(ordered) - 1
        while low <= high:
            mid = (low + high) // 2
            candidate = ordered[mid]
            if candidate.tracking_id == tracking_id:
                log.debug("Lookup %s: found at index %d", tracking_id, mid)
                return candidate
            if candidate.tracking_id < tracking_id:
                low = mid + 1
            else:
                high = mid - 1
        log.debug("Lookup %s: not found among %d packages", tracking_id, len(ordered))
        return None
