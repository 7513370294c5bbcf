"""Core package records, validation errors, and the in-memory registry."""

from __future__ import annotations

from DeliveryTracker.core.errors import (
    InvalidDestination,
    InvalidServiceTier,
    InvalidTrackingID,
    InvalidWeight,
    PackageValidationError,
)
from DeliveryTracker.core.models import PackageRecord, ServiceTier
from DeliveryTracker.core.registry import PackageRegistry

__all__ = [
    "PackageRecord",
    "ServiceTier",
    "PackageRegistry",
    "PackageValidationError",
    "InvalidTrackingID",
    "InvalidDestination",
    "InvalidWeight",
    "InvalidServiceTier",
]
