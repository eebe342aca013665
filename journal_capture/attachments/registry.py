from collections.abc import Iterator

from journal_capture.attachments.exceptions import (
    AttachmentLimitExceededError,
    AttachmentNotFoundError,
    UnsupportedAttachmentError,
)
from journal_capture.attachments.file_types import detect_file_type
from journal_capture.attachments.models import MAX_ATTACHMENTS, Attachment, IncomingFile
from journal_capture.logging.logger import Log


class AttachmentRegistry:
    """In-memory, single-owner list of attachments for one capture session.

    Input indices are assigned from a counter that never goes backwards, so an
    index stays stable for the lifetime of the session even after removals.
    """

    def __init__(self, max_attachments: int = MAX_ATTACHMENTS) -> None:
        self._max_attachments = min(max_attachments, MAX_ATTACHMENTS)
        self._attachments: dict[int, Attachment] = {}
        self._next_index = 0

    def register(self, file: IncomingFile) -> Attachment:
        """Classify and store a file.

        Raises:
            UnsupportedAttachmentError: the file type is not supported.
            AttachmentLimitExceededError: the registry is already full.
        """
        file_type = detect_file_type(file.mime_type, file.file_name)
        if file_type is None:
            raise UnsupportedAttachmentError(
                f"Unsupported file type: {file.mime_type or 'unknown'} ({file.file_name})"
            )
        if len(self._attachments) >= self._max_attachments:
            raise AttachmentLimitExceededError(
                f"Cannot attach {file.file_name}: limit of {self._max_attachments} reached"
            )

        attachment = Attachment(
            input_index=self._next_index,
            file_type=file_type,
            file_name=file.file_name,
            mime_type=file.mime_type or "application/octet-stream",
            raw_bytes=file.raw_bytes,
            file_size=file.file_size,
        )
        self._attachments[attachment.input_index] = attachment
        self._next_index += 1
        Log.debug(
            "Registered attachment",
            input_index=attachment.input_index,
            file_name=attachment.file_name,
            file_type=file_type.value,
        )
        return attachment

    def remove(self, input_index: int) -> None:
        if input_index not in self._attachments:
            raise AttachmentNotFoundError(f"No attachment with input index {input_index}")
        del self._attachments[input_index]

    def list(self) -> list[Attachment]:
        """Return a snapshot of the attachments in input order."""
        return [self._attachments[i] for i in sorted(self._attachments)]

    def clear(self) -> None:
        self._attachments.clear()

    def __iter__(self) -> Iterator[Attachment]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._attachments)
