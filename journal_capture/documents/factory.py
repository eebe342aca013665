from journal_capture.attachments.models import FileType
from journal_capture.config.settings import Settings
from journal_capture.documents.base import BaseDocumentReader
from journal_capture.documents.csv_reader import CsvReader
from journal_capture.documents.docx_reader import DocxReader
from journal_capture.documents.pdfplumber_reader import PdfPlumberReader
from journal_capture.documents.pymupdf_reader import PyMuPdfReader
from journal_capture.documents.xlsx_reader import XlsxReader


class DocumentReaderFactory:
    """Creates the document readers, one per supported document file type."""

    PDF_ENGINES: dict[str, type[BaseDocumentReader]] = {
        "pdfplumber": PdfPlumberReader,
        "pymupdf": PyMuPdfReader,
    }

    @classmethod
    def create(cls, settings: Settings) -> dict[FileType, BaseDocumentReader]:
        return {
            FileType.PDF: cls.create_pdf_reader(settings),
            FileType.DOCX: DocxReader(),
            FileType.XLSX: XlsxReader(),
            FileType.CSV: CsvReader(),
        }

    @classmethod
    def create_pdf_reader(cls, settings: Settings) -> BaseDocumentReader:
        engine = settings.pdf_engine.lower()
        reader_cls = cls.PDF_ENGINES.get(engine)
        if reader_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return reader_cls()
