from dataclasses import asdict, dataclass, field
from enum import Enum

from journal_capture.classification.models import Category, EntryType
from journal_capture.metadata.models import CaptureMetadata


class ContentSource(str, Enum):
    USER_TEXT = "user_text"
    DOCUMENTS = "documents"
    IMAGE = "image"
    PLACEHOLDER = "placeholder"


class TypeSource(str, Enum):
    """Where a resolved entry type came from, highest precedence first."""

    USER_EXPLICIT = "user_explicit"
    ATTACHMENT_SUGGESTED = "attachment_suggested"
    CLASSIFIED = "classified"
    DEFAULT = "default"


class CategorySource(str, Enum):
    CLASSIFIED = "classified"
    DEFAULT = "default"


@dataclass(frozen=True)
class TypeSelection:
    """Entry type chosen before classification: none, attachment-suggested or user-explicit."""

    entry_type: EntryType | None = None
    source: TypeSource | None = None

    @classmethod
    def none(cls) -> "TypeSelection":
        return cls()

    @classmethod
    def attachment_suggested(cls, entry_type: EntryType) -> "TypeSelection":
        return cls(entry_type=entry_type, source=TypeSource.ATTACHMENT_SUGGESTED)

    @classmethod
    def user_explicit(cls, entry_type: EntryType) -> "TypeSelection":
        return cls(entry_type=entry_type, source=TypeSource.USER_EXPLICIT)

    @classmethod
    def from_inputs(
        cls, user_override: EntryType | None, attachment_suggestion: EntryType | None
    ) -> "TypeSelection":
        if user_override is not None:
            return cls.user_explicit(user_override)
        if attachment_suggestion is not None:
            return cls.attachment_suggested(attachment_suggestion)
        return cls.none()


@dataclass(frozen=True)
class AggregatedContent:
    final_content: str
    document_narratives_joined: str
    source: ContentSource


@dataclass(frozen=True)
class ResolvedType:
    """Resolved entry type and category with their provenance."""

    entry_type: EntryType
    category: Category
    type_source: TypeSource
    category_source: CategorySource
    headline: str = ""
    subheading: str = ""
    mood: str = "reflective"


@dataclass(frozen=True)
class FocalPoint:
    x: float = 0.5
    y: float = 0.5


@dataclass(frozen=True)
class EntryImage:
    """Gallery element; ``order`` is the attachment's input index."""

    url: str
    order: int
    is_poster: bool = False
    extracted_data: dict[str, object] | None = None
    focal_point: FocalPoint | None = None


@dataclass(frozen=True)
class CompositionDraft:
    """Merged capture output handed to the confirmation stage."""

    content: str
    entry_type: EntryType
    category: Category
    images: tuple[EntryImage, ...] = ()
    metadata: CaptureMetadata | None = None
    headline: str = ""
    subheading: str = ""
    mood: str = "reflective"
    tags: tuple[str, ...] = ()
    type_source: TypeSource = TypeSource.DEFAULT
    category_source: CategorySource = CategorySource.DEFAULT
    content_source: ContentSource = ContentSource.USER_TEXT
    failed_attachments: tuple[int, ...] = field(default=())

    @property
    def poster(self) -> EntryImage | None:
        return next((image for image in self.images if image.is_poster), None)

    def to_dict(self) -> dict[str, object]:
        """JSON-ready representation with enums flattened to their values."""
        return asdict(self, dict_factory=_enum_values)


def _enum_values(items: list[tuple[str, object]]) -> dict[str, object]:
    return {key: value.value if isinstance(value, Enum) else value for key, value in items}
