import threading
import time
import uuid
from collections.abc import Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import asdict

from journal_capture.attachments.models import MAX_ATTACHMENTS, Attachment, AttachmentKind
from journal_capture.extraction.base import BaseDocumentExtractor, BaseImageExtractor
from journal_capture.extraction.exceptions import CaptureCancelledError, ExtractionError
from journal_capture.extraction.models import (
    DocumentExtraction,
    ExtractionResult,
    ImageExtraction,
)
from journal_capture.logging.logger import Log
from journal_capture.storage.base import BaseAttachmentStore


class ExtractionOrchestrator:
    """Fans attachments out to their extractors and gathers input-ordered results.

    Every attachment yields exactly one ExtractionResult. Extractor, storage
    and timeout failures become ``Failed`` results for that attachment only;
    the only exception that leaves ``run`` is CaptureCancelledError.
    """

    def __init__(
        self,
        *,
        image_extractor: BaseImageExtractor,
        document_extractor: BaseDocumentExtractor,
        store: BaseAttachmentStore,
        timeout_seconds: float,
        max_workers: int = MAX_ATTACHMENTS,
        poll_interval_seconds: float = 0.05,
    ) -> None:
        self._image_extractor = image_extractor
        self._document_extractor = document_extractor
        self._store = store
        self._timeout_seconds = timeout_seconds
        self._max_workers = max(1, min(max_workers, MAX_ATTACHMENTS))
        self._poll_interval_seconds = poll_interval_seconds

    def run(
        self,
        attachments: Sequence[Attachment],
        user_text: str,
        *,
        session_id: str | None = None,
        cancel_event: threading.Event | None = None,
    ) -> list[ExtractionResult]:
        """Extract every attachment and return results ordered by input index.

        Raises:
            CaptureCancelledError: ``cancel_event`` was set before all calls settled.
        """
        if not attachments:
            return []
        state = _RunState(session_id or uuid.uuid4().hex, cancel_event)
        ordered = sorted(attachments, key=lambda a: a.input_index)
        images = [a for a in ordered if a.kind is AttachmentKind.IMAGE]
        documents = [a for a in ordered if a.kind is AttachmentKind.DOCUMENT]
        Log.info(
            f"Extracting {len(images)} images and {len(documents)} documents",
            session_id=state.session_id,
        )

        results: dict[int, ExtractionResult] = {}
        executor = ThreadPoolExecutor(
            max_workers=min(self._max_workers, len(ordered)),
            thread_name_prefix="extraction",
        )
        try:
            futures: dict[Future[ExtractionResult], Attachment] = {
                executor.submit(self._timed, state, attachment, user_text): attachment
                for attachment in ordered
            }
            pending = set(futures)
            while pending:
                self._raise_if_cancelled(state)
                done, pending = wait(
                    pending,
                    timeout=self._poll_interval_seconds,
                    return_when=FIRST_COMPLETED,
                )
                for future in done:
                    attachment = futures[future]
                    results[attachment.input_index] = self._collect(future, attachment)
                for future in self._expired(pending, futures, state):
                    attachment = futures[future]
                    future.cancel()
                    pending.discard(future)
                    results[attachment.input_index] = self._fail(
                        attachment, f"timed out after {self._timeout_seconds}s"
                    )
            self._raise_if_cancelled(state)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        succeeded = sum(1 for r in results.values() if r.succeeded)
        Log.info(
            f"Extraction settled: {succeeded}/{len(ordered)} attachments succeeded",
            session_id=state.session_id,
        )
        return [results[a.input_index] for a in ordered]

    def discard(self, session_id: str) -> None:
        """Remove everything stored for a session whose run already returned."""
        Log.info("Discarding stored attachments", session_id=session_id)
        self._store.discard(session_id)

    def _raise_if_cancelled(self, state: "_RunState") -> None:
        if state.cancel_event is None or not state.cancel_event.is_set():
            return
        Log.info("Capture cancelled, abandoning extraction", session_id=state.session_id)
        # waits out a store already in flight; later stores see the event and back off
        with state.lock:
            self._store.discard(state.session_id)
        raise CaptureCancelledError("Capture cancelled during extraction")

    def _timed(
        self, state: "_RunState", attachment: Attachment, user_text: str
    ) -> ExtractionResult:
        state.started[attachment.input_index] = time.monotonic()
        return self._process(state, attachment, user_text)

    def _process(
        self, state: "_RunState", attachment: Attachment, user_text: str
    ) -> ExtractionResult:
        if attachment.kind is AttachmentKind.IMAGE:
            image = self._image_extractor.extract(attachment, user_text)
            url = self._store_if_live(state, attachment)
            return ExtractionResult.success(
                attachment,
                narrative=image.combined_narrative,
                structured_data=_image_data(image),
                suggested_entry_type=image.suggested_entry_type,
                suggested_tags=tuple(image.suggested_tags),
                url=url,
            )
        document = self._document_extractor.extract(attachment)
        url = self._store_if_live(state, attachment)
        return ExtractionResult.success(
            attachment,
            narrative=document.narrative,
            structured_data=_document_data(attachment, document),
            suggested_entry_type=document.suggested_entry_type,
            url=url,
        )

    def _store_if_live(self, state: "_RunState", attachment: Attachment) -> str:
        """Store the attachment unless its run was cancelled or its slot timed out."""
        with state.lock:
            if state.cancel_event is not None and state.cancel_event.is_set():
                raise CaptureCancelledError("Capture cancelled before storage")
            if attachment.input_index in state.expired:
                raise ExtractionError("Timed out before storage")
            url = self._store.store(state.session_id, attachment)
            state.stored.add(attachment.input_index)
            return url

    def _expired(
        self,
        pending: set[Future[ExtractionResult]],
        futures: dict[Future[ExtractionResult], Attachment],
        state: "_RunState",
    ) -> list[Future[ExtractionResult]]:
        now = time.monotonic()
        expired = []
        with state.lock:
            for future in pending:
                index = futures[future].input_index
                start = state.started.get(index)
                if start is None or now - start < self._timeout_seconds:
                    continue
                # already stored means it is about to resolve; let it
                if index in state.stored:
                    continue
                state.expired.add(index)
                expired.append(future)
        return expired

    def _collect(
        self, future: Future[ExtractionResult], attachment: Attachment
    ) -> ExtractionResult:
        try:
            return future.result()
        except Exception as exc:
            return self._fail(attachment, str(exc) or type(exc).__name__)

    @staticmethod
    def _fail(attachment: Attachment, reason: str) -> ExtractionResult:
        Log.warning(
            f"Extraction failed: {reason}",
            input_index=attachment.input_index,
            file_name=attachment.file_name,
            kind=attachment.kind.value,
        )
        return ExtractionResult.failure(attachment, reason)


def _image_data(image: ImageExtraction) -> dict[str, object]:
    data = asdict(image)
    data["suggested_entry_type"] = (
        image.suggested_entry_type.value if image.suggested_entry_type else None
    )
    return data


def _document_data(attachment: Attachment, document: DocumentExtraction) -> dict[str, object]:
    return {
        "file_name": attachment.file_name,
        "file_type": document.detected_file_type.value,
        "file_size": attachment.file_size,
        "extracted_text": document.extracted_text,
    }


class _RunState:
    """Bookkeeping one run shares between the waiting thread and its workers."""

    def __init__(self, session_id: str, cancel_event: threading.Event | None) -> None:
        self.session_id = session_id
        self.cancel_event = cancel_event
        self.started: dict[int, float] = {}
        self.expired: set[int] = set()
        self.stored: set[int] = set()
        # guards store, discard and the expired/stored sets
        self.lock = threading.Lock()
