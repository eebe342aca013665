from abc import ABC, abstractmethod

from journal_capture.attachments.models import Attachment
from journal_capture.extraction.models import DocumentExtraction, ImageExtraction


class BaseImageExtractor(ABC):
    """Contract for image extraction adapters."""

    @abstractmethod
    def extract(self, attachment: Attachment, user_text: str) -> ImageExtraction:
        """Derive a narrative and structured data from an image.

        Args:
            attachment: An image attachment.
            user_text: The user's running text, used to focus the extraction.

        Raises:
            Exception: any failure; the orchestrator isolates it per attachment.
        """


class BaseDocumentExtractor(ABC):
    """Contract for document extraction adapters."""

    @abstractmethod
    def extract(self, attachment: Attachment) -> DocumentExtraction:
        """Read the text of a document attachment.

        Raises:
            Exception: any failure; the orchestrator isolates it per attachment.
        """
