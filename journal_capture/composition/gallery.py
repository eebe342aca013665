from collections.abc import Sequence

from journal_capture.attachments.models import AttachmentKind
from journal_capture.composition.models import EntryImage
from journal_capture.extraction.models import ExtractionResult


def poster_index(results: Sequence[ExtractionResult]) -> int | None:
    """Input index of the poster: the first successful image, else the first successful document."""
    succeeded = sorted((r for r in results if r.succeeded), key=lambda r: r.input_index)
    for kind in (AttachmentKind.IMAGE, AttachmentKind.DOCUMENT):
        for result in succeeded:
            if result.kind is kind:
                return result.input_index
    return None


def build_gallery(results: Sequence[ExtractionResult]) -> list[EntryImage]:
    """One gallery element per successful attachment, ordered by input index.

    Failed attachments are left out entirely.
    """
    poster = poster_index(results)
    return [
        EntryImage(
            url=result.url or "",
            order=result.input_index,
            is_poster=result.input_index == poster,
            extracted_data=result.structured_data,
        )
        for result in sorted(results, key=lambda r: r.input_index)
        if result.succeeded
    ]
