from abc import ABC, abstractmethod

from journal_capture.documents.exceptions import DocumentReadError


class BaseDocumentReader(ABC):
    """Contract for all document text reader adapters."""

    @abstractmethod
    def read(self, data: bytes) -> str:
        """Read plain text from document bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text as a single stripped string; empty if the
            document has no text layer.

        Raises:
            DocumentReadError: if reading fails for any reason.
        """


class BasePdfReader(BaseDocumentReader):
    """Page-joining PDF reader; subclasses supply one engine's page texts."""

    engine: str

    def read(self, data: bytes) -> str:
        try:
            pages = self._page_texts(data)
        except Exception as exc:
            raise DocumentReadError(f"{self.engine} extraction failed: {exc}") from exc
        return "\n".join(pages).strip()

    @abstractmethod
    def _page_texts(self, data: bytes) -> list[str]:
        """Return the text of every page in order, empty strings for blank pages."""
