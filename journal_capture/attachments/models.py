from dataclasses import dataclass, field
from enum import Enum

MAX_ATTACHMENTS = 10


class AttachmentKind(str, Enum):
    IMAGE = "image"
    DOCUMENT = "document"


class FileType(str, Enum):
    """Concrete file type; every type maps to exactly one AttachmentKind."""

    IMAGE = "image"
    PDF = "pdf"
    DOCX = "docx"
    XLSX = "xlsx"
    CSV = "csv"

    @property
    def kind(self) -> AttachmentKind:
        if self is FileType.IMAGE:
            return AttachmentKind.IMAGE
        return AttachmentKind.DOCUMENT


@dataclass(frozen=True)
class IncomingFile:
    """A user-selected file before it is accepted by the registry."""

    file_name: str
    mime_type: str
    raw_bytes: bytes

    @property
    def file_size(self) -> int:
        return len(self.raw_bytes)


@dataclass(frozen=True)
class Attachment:
    """A registered file, immutable once created."""

    input_index: int
    file_type: FileType
    file_name: str
    mime_type: str
    raw_bytes: bytes = field(repr=False)
    file_size: int = 0

    @property
    def kind(self) -> AttachmentKind:
        return self.file_type.kind
