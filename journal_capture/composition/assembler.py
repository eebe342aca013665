from collections.abc import Sequence

from journal_capture.attachments.models import MAX_ATTACHMENTS
from journal_capture.composition.exceptions import InvariantViolationError
from journal_capture.composition.models import (
    AggregatedContent,
    CompositionDraft,
    EntryImage,
    ResolvedType,
)
from journal_capture.metadata.models import CaptureMetadata


class DraftAssembler:
    """Builds the immutable CompositionDraft and checks its invariants."""

    def assemble(
        self,
        content: AggregatedContent,
        resolved: ResolvedType,
        images: Sequence[EntryImage],
        metadata: CaptureMetadata | None = None,
        *,
        tags: Sequence[str] = (),
        failed_attachments: Sequence[int] = (),
    ) -> CompositionDraft:
        """Raises InvariantViolationError if the parts cannot form a valid draft."""
        self._check_content(content.final_content)
        self._check_images(images)
        return CompositionDraft(
            content=content.final_content,
            entry_type=resolved.entry_type,
            category=resolved.category,
            images=tuple(images),
            metadata=metadata,
            headline=resolved.headline,
            subheading=resolved.subheading,
            mood=resolved.mood,
            tags=tuple(tags),
            type_source=resolved.type_source,
            category_source=resolved.category_source,
            content_source=content.source,
            failed_attachments=tuple(failed_attachments),
        )

    @staticmethod
    def _check_content(final_content: object) -> None:
        if not isinstance(final_content, str):
            raise InvariantViolationError(
                f"content must be a single string, got {type(final_content).__name__}"
            )
        if not final_content.strip():
            raise InvariantViolationError("content must not be empty")

    @staticmethod
    def _check_images(images: Sequence[EntryImage]) -> None:
        if len(images) > MAX_ATTACHMENTS:
            raise InvariantViolationError(
                f"{len(images)} gallery images exceed the limit of {MAX_ATTACHMENTS}"
            )
        orders = [image.order for image in images]
        if orders != sorted(set(orders)):
            raise InvariantViolationError(
                f"gallery order must be unique and ascending, got {orders}"
            )
        posters = sum(1 for image in images if image.is_poster)
        if images and posters != 1:
            raise InvariantViolationError(
                f"gallery must have exactly one poster, found {posters}"
            )
        if any(not image.url for image in images):
            raise InvariantViolationError("every gallery image needs a url")
