import io

import openpyxl

from journal_capture.documents.base import BaseDocumentReader
from journal_capture.documents.exceptions import DocumentReadError

_MAX_CONSECUTIVE_EMPTY_ROWS = 5


class XlsxReader(BaseDocumentReader):
    """Reads every worksheet of an Excel workbook as tab-separated rows."""

    def read(self, data: bytes) -> str:
        try:
            workbook = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
        except Exception as exc:
            raise DocumentReadError(f"openpyxl could not open workbook: {exc}") from exc

        try:
            sheets = [self._read_sheet(sheet) for sheet in workbook.worksheets]
        finally:
            workbook.close()
        return "\n\n".join(s for s in sheets if s).strip()

    @staticmethod
    def _read_sheet(sheet) -> str:  # type: ignore[no-untyped-def]
        lines = [f"Sheet: {sheet.title}"]
        empty_rows = 0
        for row in sheet.iter_rows(values_only=True):
            values = ["" if cell is None else str(cell) for cell in row]
            if any(v.strip() for v in values):
                lines.append("\t".join(values).rstrip())
                empty_rows = 0
                continue
            empty_rows += 1
            if empty_rows >= _MAX_CONSECUTIVE_EMPTY_ROWS:
                break
        return "\n".join(lines) if len(lines) > 1 else ""
