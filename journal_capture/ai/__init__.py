from journal_capture.ai.client_base import BaseAIClient
from journal_capture.ai.factory import AIClientFactory
from journal_capture.ai.models import ImageInput

__all__ = ["AIClientFactory", "BaseAIClient", "ImageInput"]
