from typing import Any


class InvalidCapacityError(ValueError):
    """Raised when a cache is constructed with a capacity that is not a positive integer."""

    def __init__(self, capacity: Any):
        super().__init__(f"Cache capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
