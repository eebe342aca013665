from typing import ClassVar

from journal_capture.ai.client_base import BaseAIClient
from journal_capture.ai.example_client_adapter import ExampleClientAdapter
from journal_capture.ai.openai_client_adapter import OpenAIClientAdapter
from journal_capture.config.settings import Settings


class AIClientFactory:
    """Creates the configured AI client adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAIClient:
        """Create a configured AI client from application settings."""
        provider = settings.ai_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.ai_api_key,
            timeout_seconds=settings.ai_timeout_seconds or 30,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = (settings.ai_base_url or "").strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "ai_base_url is required for ai_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {supported}")
