"""Custom exceptions for tree operations."""


class InvalidValueError(ValueError):
    """Raised when None is passed where a comparable value is required."""
    
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation} None: tree values must be comparable")
