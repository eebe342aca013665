from abc import ABC, abstractmethod

from journal_capture.classification.models import Classification


class BaseClassifier(ABC):
    """Contract for content classification adapters."""

    @abstractmethod
    def classify(self, content: str, document_context: str | None = None) -> Classification:
        """Infer entry type, category and headline for journal content.

        Args:
            content: The entry's final content.
            document_context: Joined document text, auxiliary signal only.

        Raises:
            ClassificationError: on any failure.
        """
