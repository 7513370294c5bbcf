from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from DeliveryTracker.core.errors import (
    InvalidDestination,
    InvalidServiceTier,
    InvalidTrackingID,
    InvalidWeight,
)

# ASCII keeps \d and \s to plain digits/whitespace.
TRACKING_ID_RE: Final = re.compile(r"PKG\d{5}", re.ASCII)
DESTINATION_RE: Final = re.compile(r"\d+\s+.+", re.ASCII)


class ServiceTier(Enum):
    """Shipping service tier and its cost per weight unit."""

    STANDARD = 2.5
    EXPRESS = 4.0

    @property
    def rate(self) -> float:
        return self.value

    @classmethod
    def parse(cls, text: str) -> ServiceTier:
        """Resolve a user-typed tier name such as ``"standard"`` or ``"Express"``.

        Args:
            text: Tier name, case-insensitive.

        Returns:
            Matching tier.

        Raises:
            InvalidServiceTier: If the name is not a known tier.
        """
        key = (text or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise InvalidServiceTier() from None


def validate_tracking_id(tracking_id: str) -> bool:
    return isinstance(tracking_id, str) and TRACKING_ID_RE.fullmatch(tracking_id) is not None


def validate_destination(destination: str) -> bool:
    return isinstance(destination, str) and DESTINATION_RE.fullmatch(destination) is not None


@dataclass(frozen=True, slots=True)
class PackageRecord:
    """One shipment, immutable once constructed.

    Fields are validated in order (tracking ID, destination, weight) and the
    first failure is raised, so a half-valid record never exists.

    Attributes:
        tracking_id: Identifier of the form ``PKG`` + 5 digits.
        destination: Street number followed by a street name.
        weight: Positive weight.
        tier: Service tier that decides the cost per weight unit.
    """

    tracking_id: str
    destination: str
    weight: float
    tier: ServiceTier

    def __post_init__(self) -> None:
        if not validate_tracking_id(self.tracking_id):
            raise InvalidTrackingID()
        if not validate_destination(self.destination):
            raise InvalidDestination()
        if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
            raise InvalidWeight()
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise InvalidWeight()
        tier = self.tier
        if isinstance(tier, str):
            tier = ServiceTier.parse(tier)
        elif not isinstance(tier, ServiceTier):
            raise InvalidServiceTier()
        object.__setattr__(self, "weight", float(self.weight))
        object.__setattr__(self, "tier", tier)

    @classmethod
    def create(
        cls,
        tracking_id: str,
        destination: str,
        weight: float,
        tier: ServiceTier | str,
    ) -> PackageRecord:
        """Build a validated record, accepting the tier by name as well."""
        return cls(tracking_id=tracking_id, destination=destination, weight=weight, tier=tier)

    def cost(self) -> float:
        return self.weight * self.tier.rate

    def describe(self) -> str:
        return (
            f"Tracking ID: {self.tracking_id} | Destination: {self.destination}"
            f" | Weight: {self.weight} | Cost: ${self.cost():.2f}"
        )
