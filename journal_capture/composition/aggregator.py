from collections.abc import Sequence

from journal_capture.attachments.models import AttachmentKind
from journal_capture.composition.models import AggregatedContent, ContentSource
from journal_capture.extraction.models import ExtractionResult

DOCUMENT_DELIMITER = "\n\n---\n\n"
DEFAULT_PLACEHOLDER = "File capture"


class ContentAggregator:
    """Merges user text and extraction narratives into one content string.

    Precedence, first non-empty wins: user text, joined document narratives,
    the first image narrative, the placeholder. Document narratives are
    always returned separately as classification context.
    """

    def __init__(self, placeholder: str = DEFAULT_PLACEHOLDER) -> None:
        self._placeholder = placeholder

    def aggregate(
        self, user_text: str, results: Sequence[ExtractionResult]
    ) -> AggregatedContent:
        ordered = sorted(results, key=lambda r: r.input_index)
        documents_joined = DOCUMENT_DELIMITER.join(
            self._narratives(ordered, AttachmentKind.DOCUMENT)
        )

        text = (user_text or "").strip()
        if text:
            return AggregatedContent(text, documents_joined, ContentSource.USER_TEXT)
        if documents_joined:
            return AggregatedContent(documents_joined, documents_joined, ContentSource.DOCUMENTS)
        image_narratives = self._narratives(ordered, AttachmentKind.IMAGE)
        if image_narratives:
            return AggregatedContent(image_narratives[0], documents_joined, ContentSource.IMAGE)
        return AggregatedContent(self._placeholder, documents_joined, ContentSource.PLACEHOLDER)

    @staticmethod
    def _narratives(results: Sequence[ExtractionResult], kind: AttachmentKind) -> list[str]:
        return [
            r.narrative.strip()
            for r in results
            if r.succeeded and r.kind is kind and r.narrative and r.narrative.strip()
        ]
