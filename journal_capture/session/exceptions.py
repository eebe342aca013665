class SessionClosedError(Exception):
    """Raised when a submitted or cancelled capture session is used again."""
