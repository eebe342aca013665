class ClassificationError(Exception):
    """Raised when content classification fails."""
