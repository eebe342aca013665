class AttachmentError(Exception):
    """Base exception for attachment registration errors."""


class UnsupportedAttachmentError(AttachmentError):
    """Raised when a file is neither a supported image nor a supported document."""


class AttachmentLimitExceededError(AttachmentError):
    """Raised when registering would exceed MAX_ATTACHMENTS."""


class AttachmentNotFoundError(AttachmentError):
    """Raised when removing an input index that is not registered."""
