from abc import ABC, abstractmethod

from journal_capture.attachments.models import Attachment


class BaseAttachmentStore(ABC):
    """Contract for where attachment bytes live once they are in a gallery."""

    @abstractmethod
    def store(self, session_id: str, attachment: Attachment) -> str:
        """Persist an attachment and return the URL the gallery should use.

        Raises:
            StorageError: on any failure.
        """

    @abstractmethod
    def discard(self, session_id: str) -> None:
        """Best-effort removal of everything stored for a session."""
