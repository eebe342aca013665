import io

import pdfplumber

from journal_capture.documents.base import BasePdfReader


class PdfPlumberReader(BasePdfReader):
    """Reads text from PDF using pdfplumber."""

    engine = "pdfplumber"

    def _page_texts(self, data: bytes) -> list[str]:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]
