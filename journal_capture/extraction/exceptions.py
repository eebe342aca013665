class ExtractionError(Exception):
    """Raised when an attachment cannot be extracted."""


class ExtractionValidationError(ExtractionError):
    """Raised when an extraction reply fails domain validation."""


class CaptureCancelledError(Exception):
    """Raised when a capture is cancelled while extraction is in flight."""
