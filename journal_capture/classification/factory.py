from journal_capture.ai.client_base import BaseAIClient
from journal_capture.classification.base import BaseClassifier
from journal_capture.classification.classifier import ContentClassifier
from journal_capture.classification.models import Category
from journal_capture.config.settings import Settings


class ClassifierFactory:
    """Creates the configured content classifier."""

    @classmethod
    def create(cls, settings: Settings, client: BaseAIClient) -> BaseClassifier:
        default_category = Category.parse(settings.default_category)
        if default_category is None:
            raise ValueError(
                f"Unknown default_category '{settings.default_category}'. "
                f"Choose from: {[c.value for c in Category]}"
            )
        return ContentClassifier(
            client=client,
            model=settings.ai_classification_model_name,
            temperature=settings.ai_temperature,
            default_category=default_category,
        )
