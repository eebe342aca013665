import pymupdf

from journal_capture.documents.base import BasePdfReader


class PyMuPdfReader(BasePdfReader):
    """Reads text from PDF using PyMuPDF."""

    engine = "pymupdf"

    def _page_texts(self, data: bytes) -> list[str]:
        with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            return [page.get_text() for page in doc]
