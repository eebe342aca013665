import re
import shutil
from pathlib import Path

from journal_capture.attachments.models import Attachment
from journal_capture.logging.logger import Log
from journal_capture.storage.base import BaseAttachmentStore
from journal_capture.storage.exceptions import StorageError

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def attachment_file_path(files_root: Path, session_id: str, attachment: Attachment) -> Path:
    """Build path: {files_root}/{session_id}/{input_index}-{sanitized file name}"""
    safe_name = _UNSAFE_CHARS.sub("_", attachment.file_name) or "attachment"
    return files_root / session_id / f"{attachment.input_index}-{safe_name}"


class LocalAttachmentStore(BaseAttachmentStore):
    """Writes attachment bytes under a local root and returns ``file://`` URLs."""

    def __init__(self, files_root: Path) -> None:
        self._files_root = files_root

    def store(self, session_id: str, attachment: Attachment) -> str:
        path = attachment_file_path(self._files_root, session_id, attachment)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(attachment.raw_bytes)
        except OSError as exc:
            raise StorageError(f"Failed to store {attachment.file_name}: {exc}") from exc
        return path.resolve().as_uri()

    def discard(self, session_id: str) -> None:
        session_dir = self._files_root / session_id
        if not session_dir.exists():
            return
        try:
            shutil.rmtree(session_dir)
        except OSError as exc:
            Log.warning(f"Could not discard stored attachments: {exc}", session_id=session_id)
