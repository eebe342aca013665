import threading
from collections.abc import Sequence
from pathlib import Path

from journal_capture.ai.factory import AIClientFactory
from journal_capture.attachments.models import Attachment
from journal_capture.classification.factory import ClassifierFactory
from journal_capture.classification.models import Category, EntryType
from journal_capture.composition.aggregator import ContentAggregator
from journal_capture.composition.assembler import DraftAssembler
from journal_capture.composition.exceptions import EmptySubmissionError
from journal_capture.composition.gallery import build_gallery
from journal_capture.composition.models import CompositionDraft, ContentSource
from journal_capture.composition.type_resolver import TypeResolver, suggested_entry_type
from journal_capture.config.settings import Settings
from journal_capture.extraction.factory import ExtractorFactory
from journal_capture.extraction.models import ExtractionResult
from journal_capture.extraction.orchestrator import ExtractionOrchestrator
from journal_capture.logging.logger import Log
from journal_capture.metadata.models import CaptureMetadata
from journal_capture.storage.local_store import LocalAttachmentStore

EMPTY_CAPTURE_POLICIES = ("placeholder", "reject")


class CapturePipeline:
    """Runs one submission: extract -> aggregate -> resolve -> assemble."""

    def __init__(
        self,
        orchestrator: ExtractionOrchestrator,
        aggregator: ContentAggregator,
        type_resolver: TypeResolver,
        assembler: DraftAssembler,
        reject_empty_capture: bool = False,
    ) -> None:
        self._orchestrator = orchestrator
        self._aggregator = aggregator
        self._type_resolver = type_resolver
        self._assembler = assembler
        self._reject_empty_capture = reject_empty_capture

    def run(
        self,
        attachments: Sequence[Attachment],
        user_text: str,
        *,
        type_override: EntryType | None = None,
        metadata: CaptureMetadata | None = None,
        session_id: str | None = None,
        cancel_event: threading.Event | None = None,
    ) -> CompositionDraft:
        """Produce a CompositionDraft for one submission.

        Raises:
            EmptySubmissionError: no text and no attachments, or nothing
                inferable when empty captures are rejected.
            CaptureCancelledError: cancelled while extraction was in flight.
        """
        text = (user_text or "").strip()
        if not text and not attachments:
            raise EmptySubmissionError("Nothing to capture: add some text or an attachment")

        results = self._orchestrator.run(
            attachments, text, session_id=session_id, cancel_event=cancel_event
        )

        content = self._aggregator.aggregate(text, results)
        if content.source is ContentSource.PLACEHOLDER and self._reject_empty_capture:
            raise EmptySubmissionError("No content could be extracted from the attachments")

        resolved = self._type_resolver.resolve(
            type_override,
            suggested_entry_type(results),
            content.final_content,
            content.document_narratives_joined,
        )
        draft = self._assembler.assemble(
            content,
            resolved,
            build_gallery(results),
            metadata,
            tags=_merged_tags(results),
            failed_attachments=[r.input_index for r in results if not r.succeeded],
        )
        Log.info(
            f"Composed draft: {draft.entry_type.value}/{draft.category.value}, "
            f"{len(draft.images)} images, content from {draft.content_source.value}",
            session_id=session_id,
        )
        return draft

    def discard(self, session_id: str) -> None:
        """Drop the stored attachments of a submission that will not be handed over."""
        self._orchestrator.discard(session_id)


def _merged_tags(results: Sequence[ExtractionResult]) -> list[str]:
    tags: list[str] = []
    for result in results:
        for tag in result.suggested_tags:
            if tag not in tags:
                tags.append(tag)
    return tags


def build_pipeline(settings: Settings, files_root: Path | None = None) -> CapturePipeline:
    """Build a CapturePipeline with all required adapters."""
    policy = settings.empty_capture_policy.lower()
    if policy not in EMPTY_CAPTURE_POLICIES:
        raise ValueError(
            f"Unknown empty_capture_policy '{policy}'. Choose from: {list(EMPTY_CAPTURE_POLICIES)}"
        )
    default_entry_type = EntryType.parse(settings.default_entry_type)
    if default_entry_type is None:
        raise ValueError(
            f"Unknown default_entry_type '{settings.default_entry_type}'. "
            f"Choose from: {[t.value for t in EntryType]}"
        )

    client = AIClientFactory.create(settings)
    classifier = ClassifierFactory.create(settings, client)
    orchestrator = ExtractionOrchestrator(
        image_extractor=ExtractorFactory.create_image_extractor(settings, client),
        document_extractor=ExtractorFactory.create_document_extractor(settings),
        store=LocalAttachmentStore(files_root or Path(settings.attachments_root)),
        timeout_seconds=settings.extraction_timeout_seconds,
        max_workers=settings.max_concurrent_extractions,
    )
    return CapturePipeline(
        orchestrator=orchestrator,
        aggregator=ContentAggregator(placeholder=settings.empty_capture_placeholder),
        type_resolver=TypeResolver(
            classifier,
            default_entry_type=default_entry_type,
            default_category=Category.parse(settings.default_category) or Category.FUN,
        ),
        assembler=DraftAssembler(),
        reject_empty_capture=policy == "reject",
    )
