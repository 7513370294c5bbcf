"""DeliveryTracker: an in-memory package tracker driven by a text menu."""
