class CompositionError(Exception):
    """Base exception for composition draft errors."""


class InvariantViolationError(CompositionError):
    """Raised when an assembled draft breaks a structural invariant.

    This is a programming error, not a user-facing failure.
    """


class EmptySubmissionError(CompositionError):
    """Raised when a submission has no content to capture."""
