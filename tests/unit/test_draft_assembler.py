import pytest

from journal_capture.classification.models import Category, EntryType
from journal_capture.composition.assembler import DraftAssembler
from journal_capture.composition.exceptions import InvariantViolationError
from journal_capture.composition.models import (
    AggregatedContent,
    CategorySource,
    ContentSource,
    EntryImage,
    ResolvedType,
    TypeSource,
)
from journal_capture.metadata.models import CaptureMetadata, DeviceClass

_RESOLVED = ResolvedType(
    entry_type=EntryType.NOTE,
    category=Category.FINANCE,
    type_source=TypeSource.ATTACHMENT_SUGGESTED,
    category_source=CategorySource.CLASSIFIED,
    headline="Coffee Receipt",
)
_METADATA = CaptureMetadata(
    captured_at="2025-03-01T09:00:00+00:00",
    day_of_week="Saturday",
    time_of_day="morning",
    device=DeviceClass.MOBILE,
)


def _content(text: object = "Bought coffee") -> AggregatedContent:
    return AggregatedContent(text, "", ContentSource.USER_TEXT)  # type: ignore[arg-type]


class TestDraftAssembler:
    def test_assembles_draft(self) -> None:
        images = [EntryImage(url="u1", order=1, is_poster=True), EntryImage(url="u3", order=3)]
        draft = DraftAssembler().assemble(
            _content(), _RESOLVED, images, _METADATA, tags=("coffee",), failed_attachments=(0,)
        )
        assert draft.content == "Bought coffee"
        assert draft.entry_type is EntryType.NOTE
        assert draft.category is Category.FINANCE
        assert draft.images == tuple(images)
        assert draft.poster is images[0]
        assert draft.metadata is _METADATA
        assert draft.tags == ("coffee",)
        assert draft.failed_attachments == (0,)
        assert draft.type_source is TypeSource.ATTACHMENT_SUGGESTED

    def test_no_images_is_valid(self) -> None:
        draft = DraftAssembler().assemble(_content(), _RESOLVED, [])
        assert draft.images == ()
        assert draft.poster is None

    def test_to_dict_flattens_enums(self) -> None:
        images = [EntryImage(url="u1", order=1, is_poster=True)]
        data = DraftAssembler().assemble(_content(), _RESOLVED, images, _METADATA).to_dict()
        assert data["entry_type"] == "note"
        assert data["category"] == "Finance"
        assert data["metadata"]["device"] == "mobile"  # type: ignore[index]
        assert data["images"][0]["is_poster"] is True  # type: ignore[index]

    @pytest.mark.parametrize("text", ["", "   "])
    def test_rejects_empty_content(self, text: str) -> None:
        with pytest.raises(InvariantViolationError, match="must not be empty"):
            DraftAssembler().assemble(_content(text), _RESOLVED, [])

    def test_rejects_non_string_content(self) -> None:
        with pytest.raises(InvariantViolationError, match="single string"):
            DraftAssembler().assemble(_content(["a", "b"]), _RESOLVED, [])

    def test_rejects_too_many_images(self) -> None:
        images = [EntryImage(url=f"u{i}", order=i, is_poster=i == 0) for i in range(11)]
        with pytest.raises(InvariantViolationError, match="exceed the limit"):
            DraftAssembler().assemble(_content(), _RESOLVED, images)

    def test_rejects_duplicate_order(self) -> None:
        images = [EntryImage(url="a", order=1, is_poster=True), EntryImage(url="b", order=1)]
        with pytest.raises(InvariantViolationError, match="unique and ascending"):
            DraftAssembler().assemble(_content(), _RESOLVED, images)

    def test_rejects_descending_order(self) -> None:
        images = [EntryImage(url="a", order=2, is_poster=True), EntryImage(url="b", order=1)]
        with pytest.raises(InvariantViolationError, match="unique and ascending"):
            DraftAssembler().assemble(_content(), _RESOLVED, images)

    @pytest.mark.parametrize("flags", [(False, False), (True, True)])
    def test_requires_exactly_one_poster(self, flags: tuple[bool, bool]) -> None:
        images = [
            EntryImage(url="a", order=0, is_poster=flags[0]),
            EntryImage(url="b", order=1, is_poster=flags[1]),
        ]
        with pytest.raises(InvariantViolationError, match="exactly one poster"):
            DraftAssembler().assemble(_content(), _RESOLVED, images)

    def test_rejects_missing_url(self) -> None:
        images = [EntryImage(url="", order=0, is_poster=True)]
        with pytest.raises(InvariantViolationError, match="url"):
            DraftAssembler().assemble(_content(), _RESOLVED, images)
