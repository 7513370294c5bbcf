"""Shared utilities for DeliveryTracker."""
