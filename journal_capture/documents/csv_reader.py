import csv
import io

from journal_capture.documents.base import BaseDocumentReader
from journal_capture.documents.exceptions import DocumentReadError

_PREVIEW_ROWS = 10
_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")


class CsvReader(BaseDocumentReader):
    """Reads the first lines of a CSV file, header included."""

    def __init__(self, preview_rows: int = _PREVIEW_ROWS) -> None:
        self._preview_rows = preview_rows

    def read(self, data: bytes) -> str:
        text = self._decode(data)
        try:
            rows = list(csv.reader(io.StringIO(text)))
        except csv.Error as exc:
            raise DocumentReadError(f"CSV parsing failed: {exc}") from exc
        preview = rows[: self._preview_rows]
        return "\n".join(", ".join(cell.strip() for cell in row) for row in preview if row).strip()

    @staticmethod
    def _decode(data: bytes) -> str:
        for encoding in _ENCODINGS:
            try:
                return data.decode(encoding)
            except UnicodeDecodeError:
                continue
        raise DocumentReadError("CSV file is not valid text")
