import io

import docx

from journal_capture.documents.base import BaseDocumentReader
from journal_capture.documents.exceptions import DocumentReadError


class DocxReader(BaseDocumentReader):
    """Reads paragraphs and table rows from a Word document using python-docx."""

    def read(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
        except Exception as exc:
            raise DocumentReadError(f"python-docx could not open document: {exc}") from exc

        parts = [p.text.strip() for p in document.paragraphs if p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                if any(cells):
                    parts.append(" | ".join(cells))
        return "\n".join(parts).strip()
