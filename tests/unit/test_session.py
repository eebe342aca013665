import threading
from unittest.mock import MagicMock

import pytest

from journal_capture.attachments.models import IncomingFile
from journal_capture.attachments.registry import AttachmentRegistry
from journal_capture.classification.models import EntryType
from journal_capture.composition.exceptions import EmptySubmissionError
from journal_capture.extraction.exceptions import CaptureCancelledError
from journal_capture.session.exceptions import SessionClosedError
from journal_capture.session.session import CaptureSession

_PNG = IncomingFile(file_name="a.png", mime_type="image/png", raw_bytes=b"png")


class TestCaptureSession:
    def test_submit_runs_pipeline_with_registered_attachments(self) -> None:
        pipeline = MagicMock()
        session = CaptureSession(pipeline)
        attachment = session.register(_PNG)

        draft = session.submit("note", type_override=EntryType.NOTE)

        assert draft is pipeline.run.return_value
        args, kwargs = pipeline.run.call_args
        assert args == ([attachment], "note")
        assert kwargs["type_override"] is EntryType.NOTE
        assert kwargs["session_id"] == session.session_id
        assert isinstance(kwargs["cancel_event"], threading.Event)

    def test_submit_closes_and_clears(self) -> None:
        registry = AttachmentRegistry()
        session = CaptureSession(MagicMock(), registry)
        session.register(_PNG)
        session.submit("")
        assert session.closed
        assert len(registry) == 0

    def test_second_submit_raises(self) -> None:
        session = CaptureSession(MagicMock())
        session.submit("x")
        with pytest.raises(SessionClosedError):
            session.submit("x")

    def test_register_after_submit_raises(self) -> None:
        session = CaptureSession(MagicMock())
        session.submit("x")
        with pytest.raises(SessionClosedError):
            session.register(_PNG)

    def test_remove_keeps_other_indices(self) -> None:
        session = CaptureSession(MagicMock())
        first = session.register(_PNG)
        second = session.register(_PNG)
        session.remove(first.input_index)
        assert session.attachments() == [second]

    def test_empty_submission_leaves_session_open(self) -> None:
        pipeline = MagicMock()
        pipeline.run.side_effect = EmptySubmissionError("nothing")
        session = CaptureSession(pipeline)
        with pytest.raises(EmptySubmissionError):
            session.submit("")
        assert not session.closed

    def test_cancel_discards_attachments_and_blocks_use(self) -> None:
        registry = AttachmentRegistry()
        session = CaptureSession(MagicMock(), registry)
        session.register(_PNG)
        session.cancel()
        assert session.cancelled
        assert len(registry) == 0
        with pytest.raises(CaptureCancelledError):
            session.submit("x")

    def test_cancel_during_submit_suppresses_draft(self) -> None:
        pipeline = MagicMock()
        session = CaptureSession(pipeline)

        def run_and_cancel(*args: object, **kwargs: object) -> MagicMock:
            session.cancel()
            return MagicMock()

        pipeline.run.side_effect = run_and_cancel
        with pytest.raises(CaptureCancelledError):
            session.submit("x")
        pipeline.discard.assert_called_once_with(session.session_id)

    def test_completed_submit_keeps_stored_attachments(self) -> None:
        pipeline = MagicMock()
        session = CaptureSession(pipeline)
        session.submit("x")
        pipeline.discard.assert_not_called()

    def test_cancel_after_submit_is_noop(self) -> None:
        session = CaptureSession(MagicMock())
        session.submit("x")
        session.cancel()
        assert not session.cancelled
