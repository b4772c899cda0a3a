"""Domain errors."""


class InvalidRecordError(ValueError):
    """Raised when a record would violate a field-level invariant."""
