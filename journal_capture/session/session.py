import threading
import uuid

from journal_capture.attachments.models import Attachment, IncomingFile
from journal_capture.attachments.registry import AttachmentRegistry
from journal_capture.classification.models import EntryType
from journal_capture.composition.models import CompositionDraft
from journal_capture.extraction.exceptions import CaptureCancelledError
from journal_capture.logging.logger import Log
from journal_capture.metadata.models import CaptureMetadata
from journal_capture.session.exceptions import SessionClosedError
from journal_capture.session.pipeline import CapturePipeline


class CaptureSession:
    """One capture from first attachment to submission or cancellation.

    The session is the only writer of its attachment registry. ``cancel`` may
    be called from another thread while ``submit`` is running; the running
    submission then raises CaptureCancelledError and no draft is produced.
    """

    def __init__(self, pipeline: CapturePipeline, registry: AttachmentRegistry | None = None) -> None:
        self._pipeline = pipeline
        self._registry = registry or AttachmentRegistry()
        self._cancel_event = threading.Event()
        # orders cancel against the hand-over at the end of submit
        self._lock = threading.Lock()
        self._closed = False
        self.session_id = uuid.uuid4().hex

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def register(self, file: IncomingFile) -> Attachment:
        self._ensure_open()
        return self._registry.register(file)

    def remove(self, input_index: int) -> None:
        self._ensure_open()
        self._registry.remove(input_index)

    def attachments(self) -> list[Attachment]:
        return self._registry.list()

    def submit(
        self,
        user_text: str,
        type_override: EntryType | None = None,
        metadata: CaptureMetadata | None = None,
    ) -> CompositionDraft:
        """Run the pipeline once and close the session.

        Raises:
            EmptySubmissionError: nothing to capture; the session stays open.
            CaptureCancelledError: the session was cancelled mid-flight.
            SessionClosedError: the session was already submitted or cancelled.
        """
        self._ensure_open()
        draft = self._pipeline.run(
            self._registry.list(),
            user_text,
            type_override=type_override,
            metadata=metadata,
            session_id=self.session_id,
            cancel_event=self._cancel_event,
        )
        with self._lock:
            if self._cancel_event.is_set():
                # extraction finished before the cancel, so its files are still stored
                self._pipeline.discard(self.session_id)
                raise CaptureCancelledError("Capture cancelled before the draft was handed over")
            self._close()
        return draft

    def cancel(self) -> None:
        with self._lock:
            if self._closed:
                return
            Log.info("Cancelling capture session", session_id=self.session_id)
            self._cancel_event.set()
            self._close()

    def _close(self) -> None:
        self._closed = True
        self._registry.clear()

    def _ensure_open(self) -> None:
        if self._cancel_event.is_set():
            raise CaptureCancelledError("Capture session was cancelled")
        if self._closed:
            raise SessionClosedError("Capture session is already submitted")
