from abc import ABC, abstractmethod

from journal_capture.ai.models import ImageInput


class BaseAIClient(ABC):
    """Contract for provider-specific AI clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        schema_name: str,
        image: ImageInput | None = None,
    ) -> str:
        """Return provider response as plain text.

        Raises:
            AIClientNetworkError: connection failures, timeouts, non-2xx replies.
            AIClientError: the provider replied without usable content.
        """
