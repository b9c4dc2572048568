"""Custom exceptions for in-memory cache operations."""

from typing import Any


class InvalidCapacityError(ValueError):
    """Raised when a cache is built with a non-positive or non-integer capacity."""
    
    def __init__(self, capacity: Any):
        self.capacity = capacity
        super().__init__(f"Invalid capacity: {capacity!r}. Must be a positive integer greater than 0")
