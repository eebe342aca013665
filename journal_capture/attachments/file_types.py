"""MIME type and extension based classification of user-selected files."""

from pathlib import Path

from journal_capture.attachments.models import FileType

_MIME_TYPES: dict[str, FileType] = {
    "image/jpeg": FileType.IMAGE,
    "image/jpg": FileType.IMAGE,
    "image/png": FileType.IMAGE,
    "image/gif": FileType.IMAGE,
    "image/webp": FileType.IMAGE,
    "image/heic": FileType.IMAGE,
    "image/heif": FileType.IMAGE,
    "application/pdf": FileType.PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": FileType.DOCX,
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": FileType.XLSX,
    "text/csv": FileType.CSV,
    "application/csv": FileType.CSV,
}

_EXTENSIONS: dict[str, FileType] = {
    ".jpg": FileType.IMAGE,
    ".jpeg": FileType.IMAGE,
    ".png": FileType.IMAGE,
    ".gif": FileType.IMAGE,
    ".webp": FileType.IMAGE,
    ".heic": FileType.IMAGE,
    ".heif": FileType.IMAGE,
    ".pdf": FileType.PDF,
    ".docx": FileType.DOCX,
    ".xlsx": FileType.XLSX,
    ".csv": FileType.CSV,
}

# Browsers report these for files they cannot identify; fall through to the extension.
_GENERIC_MIME_TYPES = frozenset({"", "application/octet-stream", "binary/octet-stream"})


def detect_file_type(mime_type: str, file_name: str) -> FileType | None:
    """Return the FileType for a file, or None if it is unsupported.

    The MIME type wins when it is specific; a missing or generic MIME type
    falls back to the file name extension.
    """
    normalized = (mime_type or "").split(";")[0].strip().lower()
    if normalized not in _GENERIC_MIME_TYPES:
        detected = _MIME_TYPES.get(normalized)
        if detected is not None:
            return detected
        if normalized.startswith("image/"):
            return None
    return _EXTENSIONS.get(Path(file_name).suffix.lower())
