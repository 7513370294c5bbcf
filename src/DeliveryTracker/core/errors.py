"""Validation errors raised while building package records.

All of them derive from `ValueError` so callers that only care about
"bad input" can catch one type. A lookup miss is not an error: the
registry returns ``None`` for it.
"""

from __future__ import annotations


class PackageValidationError(ValueError):
    """Base class for record construction failures."""

    message = "Invalid package."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidTrackingID(PackageValidationError):
    message = "Invalid tracking ID format. Must be like PKG12345."


class InvalidDestination(PackageValidationError):
    message = "Invalid destination format. Must include street name and number."


class InvalidWeight(PackageValidationError):
    message = "Weight must be a positive number."


class InvalidServiceTier(PackageValidationError):
    message = "Invalid service tier. Must be Standard or Express."
