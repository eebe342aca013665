class AIClientError(Exception):
    """Raised when an AI provider call fails or returns an unusable reply."""


class AIClientNetworkError(AIClientError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
