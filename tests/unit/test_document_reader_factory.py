import pytest

from journal_capture.attachments.models import FileType
from journal_capture.config.settings import Settings
from journal_capture.documents.csv_reader import CsvReader
from journal_capture.documents.docx_reader import DocxReader
from journal_capture.documents.factory import DocumentReaderFactory
from journal_capture.documents.pdfplumber_reader import PdfPlumberReader
from journal_capture.documents.pymupdf_reader import PyMuPdfReader
from journal_capture.documents.xlsx_reader import XlsxReader


class TestDocumentReaderFactory:
    def test_creates_reader_for_every_document_type(self) -> None:
        readers = DocumentReaderFactory.create(Settings())
        assert set(readers) == {FileType.PDF, FileType.DOCX, FileType.XLSX, FileType.CSV}
        assert isinstance(readers[FileType.DOCX], DocxReader)
        assert isinstance(readers[FileType.XLSX], XlsxReader)
        assert isinstance(readers[FileType.CSV], CsvReader)

    def test_default_pdf_engine_is_pdfplumber(self) -> None:
        assert isinstance(DocumentReaderFactory.create_pdf_reader(Settings()), PdfPlumberReader)

    def test_pdf_engine_is_case_insensitive(self) -> None:
        reader = DocumentReaderFactory.create_pdf_reader(Settings(pdf_engine="PyMuPDF"))
        assert isinstance(reader, PyMuPdfReader)

    def test_unknown_pdf_engine_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            DocumentReaderFactory.create_pdf_reader(Settings(pdf_engine="tesseract"))
