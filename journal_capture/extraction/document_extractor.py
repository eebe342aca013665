import re

from journal_capture.attachments.models import Attachment, AttachmentKind, FileType
from journal_capture.classification.models import EntryType
from journal_capture.documents.base import BaseDocumentReader
from journal_capture.extraction.base import BaseDocumentExtractor
from journal_capture.extraction.exceptions import ExtractionError
from journal_capture.extraction.models import DocumentExtraction
from journal_capture.logging.logger import Log

_FILE_TYPE_LABELS: dict[FileType, str] = {
    FileType.PDF: "PDF document",
    FileType.DOCX: "Word document",
    FileType.XLSX: "Excel spreadsheet",
    FileType.CSV: "CSV file",
}

_CHECKLIST_LINE = re.compile(
    r"^\s*(?:[-*•]\s*)?(?:\[[ xX]?\]|☐|☑|✓|✔|todo:|to-do:)", re.IGNORECASE
)
_MIN_CHECKLIST_LINES = 2


class DocumentExtractor(BaseDocumentExtractor):
    """Reads document text with the reader registered for its file type."""

    def __init__(self, readers: dict[FileType, BaseDocumentReader]) -> None:
        self._readers = readers

    def extract(self, attachment: Attachment) -> DocumentExtraction:
        if attachment.kind is not AttachmentKind.DOCUMENT:
            raise ExtractionError(f"{attachment.file_name} is not a document")
        reader = self._readers.get(attachment.file_type)
        if reader is None:
            raise ExtractionError(f"No reader for file type '{attachment.file_type.value}'")

        text = reader.read(attachment.raw_bytes)
        Log.info(
            f"Extracted {len(text)} chars from {attachment.file_type.value} document",
            input_index=attachment.input_index,
        )
        return DocumentExtraction(
            extracted_text=text,
            detected_file_type=attachment.file_type,
            narrative=text or describe_document(attachment),
            suggested_entry_type=suggest_entry_type(text),
        )


def describe_document(attachment: Attachment) -> str:
    """Label for a document whose text could not be read, e.g. ``PDF document: a.pdf (1.2KB)``."""
    label = _FILE_TYPE_LABELS.get(attachment.file_type, "Document")
    return f"{label}: {attachment.file_name} ({attachment.file_size / 1024:.1f}KB)"


def suggest_entry_type(text: str) -> EntryType | None:
    """Suggest ``action`` when most non-empty lines of a document are checklist items."""
    lines = [line for line in text.splitlines() if line.strip()]
    checklist = [line for line in lines if _CHECKLIST_LINE.match(line)]
    if len(checklist) >= _MIN_CHECKLIST_LINES and len(checklist) * 2 >= len(lines):
        return EntryType.ACTION
    return None
