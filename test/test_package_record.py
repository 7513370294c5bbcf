"""Tests for package record construction, validation and cost."""

import sys
import unittest
from dataclasses import FrozenInstanceError
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DeliveryTracker.core.errors import (
    InvalidDestination,
    InvalidServiceTier,
    InvalidTrackingID,
    InvalidWeight,
    PackageValidationError,
)
from DeliveryTracker.core.models import PackageRecord, ServiceTier


class TestPackageRecordCreate(unittest.TestCase):
    def test_fields_equal_inputs(self) -> None:
        record = PackageRecord.create("PKG12345", "42 Main Street", 3.5, ServiceTier.EXPRESS)

        self.assertEqual(record.tracking_id, "PKG12345")
        self.assertEqual(record.destination, "42 Main Street")
        self.assertEqual(record.weight, 3.5)
        self.assertIs(record.tier, ServiceTier.EXPRESS)

    def test_tier_accepts_name_case_insensitively(self) -> None:
        self.assertIs(PackageRecord.create("PKG00001", "1 A St", 1, "standard").tier, ServiceTier.STANDARD)
        self.assertIs(PackageRecord.create("PKG00001", "1 A St", 1, " Express ").tier, ServiceTier.EXPRESS)

    def test_unknown_tier_rejected(self) -> None:
        with self.assertRaises(InvalidServiceTier):
            PackageRecord.create("PKG00001", "1 A St", 1.0, "Overnight")

    def test_record_is_immutable(self) -> None:
        record = PackageRecord.create("PKG12345", "42 Main Street", 1.0, ServiceTier.STANDARD)
        with self.assertRaises(FrozenInstanceError):
            record.weight = 2.0  # type: ignore[misc]

    def test_int_weight_stored_as_float(self) -> None:
        record = PackageRecord.create("PKG12345", "42 Main Street", 5, ServiceTier.STANDARD)
        self.assertIsInstance(record.weight, float)
        self.assertIn("Weight: 5.0", record.describe())


class TestPackageRecordValidation(unittest.TestCase):
    def test_invalid_tracking_ids(self) -> None:
        for bad in ("PKG123", "pkg12345", "PKG123456", "PKG1234a", " PKG12345", "PKG12345\n", ""):
            with self.subTest(tracking_id=bad):
                with self.assertRaises(InvalidTrackingID):
                    PackageRecord.create(bad, "42 Main Street", 1.0, ServiceTier.STANDARD)

    def test_valid_tracking_id(self) -> None:
        record = PackageRecord.create("PKG12345", "42 Main Street", 1.0, ServiceTier.STANDARD)
        self.assertEqual(record.tracking_id, "PKG12345")

    def test_invalid_destinations(self) -> None:
        for bad in ("MainStreet", "42", "42 ", "Main Street 42", "42Main"):
            with self.subTest(destination=bad):
                with self.assertRaises(InvalidDestination):
                    PackageRecord.create("PKG12345", bad, 1.0, ServiceTier.STANDARD)

    def test_valid_destination(self) -> None:
        record = PackageRecord.create("PKG12345", "42 Main Street", 1.0, ServiceTier.STANDARD)
        self.assertEqual(record.destination, "42 Main Street")

    def test_non_positive_weight_rejected(self) -> None:
        for bad in (0, 0.0, -0.0, -1.0, float("nan"), float("inf")):
            with self.subTest(weight=bad):
                with self.assertRaises(InvalidWeight):
                    PackageRecord.create("PKG12345", "42 Main Street", bad, ServiceTier.STANDARD)

    def test_tiny_positive_weight_accepted(self) -> None:
        record = PackageRecord.create("PKG12345", "42 Main Street", 0.0001, ServiceTier.STANDARD)
        self.assertEqual(record.weight, 0.0001)

    def test_tracking_id_checked_first(self) -> None:
        with self.assertRaises(InvalidTrackingID):
            PackageRecord.create("bad", "bad", -1.0, "nope")

    def test_destination_checked_before_weight(self) -> None:
        with self.assertRaises(InvalidDestination):
            PackageRecord.create("PKG12345", "bad", -1.0, ServiceTier.STANDARD)

    def test_errors_share_value_error_base(self) -> None:
        with self.assertRaises(PackageValidationError) as ctx:
            PackageRecord.create("PKG12345", "42 Main Street", -1.0, ServiceTier.STANDARD)
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertEqual(str(ctx.exception), "Weight must be a positive number.")


class TestPackageRecordCost(unittest.TestCase):
    def test_standard_cost(self) -> None:
        record = PackageRecord.create("PKG00001", "12 Elm St", 5.0, ServiceTier.STANDARD)
        self.assertAlmostEqual(record.cost(), 12.5)

    def test_express_cost(self) -> None:
        record = PackageRecord.create("PKG00002", "5 Oak Ave", 2.0, ServiceTier.EXPRESS)
        self.assertAlmostEqual(record.cost(), 8.0)

    def test_cost_matches_tier_rate(self) -> None:
        for weight in (0.0001, 1.0, 3.3, 250.0):
            for tier, rate in ((ServiceTier.STANDARD, 2.5), (ServiceTier.EXPRESS, 4.0)):
                with self.subTest(weight=weight, tier=tier):
                    record = PackageRecord.create("PKG00001", "1 A St", weight, tier)
                    self.assertAlmostEqual(record.cost(), weight * rate)

    def test_describe_formats_cost_with_two_decimals(self) -> None:
        record = PackageRecord.create("PKG00001", "12 Elm St", 5.0, ServiceTier.STANDARD)
        self.assertEqual(
            record.describe(),
            "Tracking ID: PKG00001 | Destination: 12 Elm St | Weight: 5.0 | Cost: $12.50",
        )


if __name__ == "__main__":
    unittest.main()
