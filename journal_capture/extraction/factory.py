from journal_capture.ai.client_base import BaseAIClient
from journal_capture.config.settings import Settings
from journal_capture.documents.factory import DocumentReaderFactory
from journal_capture.extraction.base import BaseDocumentExtractor, BaseImageExtractor
from journal_capture.extraction.document_extractor import DocumentExtractor
from journal_capture.extraction.image_extractor import ImageExtractor


class ExtractorFactory:
    """Creates the configured image and document extractors."""

    @classmethod
    def create_image_extractor(cls, settings: Settings, client: BaseAIClient) -> BaseImageExtractor:
        return ImageExtractor(
            client=client,
            model=settings.ai_vision_model_name,
            temperature=settings.ai_temperature,
        )

    @classmethod
    def create_document_extractor(cls, settings: Settings) -> BaseDocumentExtractor:
        return DocumentExtractor(readers=DocumentReaderFactory.create(settings))
