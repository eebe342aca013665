from dataclasses import dataclass, field
from enum import Enum

from journal_capture.attachments.models import Attachment, AttachmentKind, FileType
from journal_capture.classification.models import EntryType


class ExtractionStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class PrimaryContent:
    type: str = "image"
    items: list[str] = field(default_factory=list)
    context: str = ""


@dataclass(frozen=True)
class ExtractedText:
    relevant: list[str] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)
    details: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Purchase:
    detected: bool = False
    product_name: str | None = None
    price: float | None = None
    currency: str = "USD"
    seller: str | None = None
    order_date: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class UserConnectionAnalysis:
    what_they_noticed_about: str = ""
    why_it_matters: str = ""
    key_elements: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ImageExtraction:
    """Validated reply of the image extraction service."""

    image_type: str
    combined_narrative: str
    primary_content: PrimaryContent = field(default_factory=PrimaryContent)
    extracted_text: ExtractedText = field(default_factory=ExtractedText)
    purchase: Purchase = field(default_factory=Purchase)
    user_connection: UserConnectionAnalysis = field(default_factory=UserConnectionAnalysis)
    suggested_tags: list[str] = field(default_factory=list)
    suggested_entry_type: EntryType | None = None


@dataclass(frozen=True)
class DocumentExtraction:
    """Output of the document extractor."""

    extracted_text: str
    detected_file_type: FileType
    narrative: str
    suggested_entry_type: EntryType | None = None


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of extracting one attachment, discriminated by kind and status.

    A failed result never carries narrative, structured data, suggestions or
    a URL; ``error`` holds the diagnostic message instead.
    """

    input_index: int
    kind: AttachmentKind
    file_type: FileType
    file_name: str
    status: ExtractionStatus
    narrative: str | None = None
    structured_data: dict[str, object] | None = None
    suggested_entry_type: EntryType | None = None
    suggested_tags: tuple[str, ...] = ()
    url: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.status is ExtractionStatus.FAILED and (
            self.narrative is not None
            or self.structured_data is not None
            or self.suggested_entry_type is not None
            or self.suggested_tags
            or self.url is not None
        ):
            raise ValueError("A failed extraction result cannot carry extracted content")

    @property
    def succeeded(self) -> bool:
        return self.status is ExtractionStatus.SUCCESS

    @classmethod
    def success(
        cls,
        attachment: Attachment,
        *,
        narrative: str,
        structured_data: dict[str, object],
        url: str,
        suggested_entry_type: EntryType | None = None,
        suggested_tags: tuple[str, ...] = (),
    ) -> "ExtractionResult":
        return cls(
            input_index=attachment.input_index,
            kind=attachment.kind,
            file_type=attachment.file_type,
            file_name=attachment.file_name,
            status=ExtractionStatus.SUCCESS,
            narrative=narrative,
            structured_data=structured_data,
            suggested_entry_type=suggested_entry_type,
            suggested_tags=suggested_tags,
            url=url,
        )

    @classmethod
    def failure(cls, attachment: Attachment, error: str) -> "ExtractionResult":
        return cls(
            input_index=attachment.input_index,
            kind=attachment.kind,
            file_type=attachment.file_type,
            file_name=attachment.file_name,
            status=ExtractionStatus.FAILED,
            error=error,
        )
