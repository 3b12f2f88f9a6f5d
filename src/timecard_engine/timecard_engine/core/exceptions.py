class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedEventError(ValidationError):
    """Raised when a raw record has an unknown kind or an unparsable timestamp."""

    def __init__(self, message: str, *, record=None):
        super().__init__(message)
        self.record = record


class UnorderedEventsError(DomainError):
    """Raised when an event batch is not in non-decreasing timestamp order."""


class InvalidRangeError(ValidationError):
    """Raised when a custom date range is rejected."""
