class StorageError(Exception):
    """Raised when attachment bytes cannot be stored."""
