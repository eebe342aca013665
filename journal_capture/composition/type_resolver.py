from collections.abc import Sequence

from journal_capture.classification.base import BaseClassifier
from journal_capture.classification.models import Category, Classification, EntryType
from journal_capture.classification.validator import fallback_headline
from journal_capture.composition.models import (
    CategorySource,
    ResolvedType,
    TypeSelection,
    TypeSource,
)
from journal_capture.extraction.models import ExtractionResult
from journal_capture.logging.logger import Log


def suggested_entry_type(results: Sequence[ExtractionResult]) -> EntryType | None:
    """Entry type suggested by the first successful attachment, in input order."""
    for result in sorted(results, key=lambda r: r.input_index):
        if result.succeeded and result.suggested_entry_type is not None:
            return result.suggested_entry_type
    return None


class TypeResolver:
    """Resolves entry type and category.

    Type precedence: user's explicit choice, attachment suggestion,
    classification, default. Category comes from classification or the
    default. Classification failures never propagate.
    """

    def __init__(
        self,
        classifier: BaseClassifier,
        default_entry_type: EntryType = EntryType.STORY,
        default_category: Category = Category.FUN,
    ) -> None:
        self._classifier = classifier
        self._default_entry_type = default_entry_type
        self._default_category = default_category

    def resolve(
        self,
        user_override: EntryType | None,
        attachment_suggestion: EntryType | None,
        content: str,
        document_context: str | None = None,
    ) -> ResolvedType:
        selection = TypeSelection.from_inputs(user_override, attachment_suggestion)
        classification = self._classify(content, document_context)

        if selection.entry_type is not None and selection.source is not None:
            entry_type, type_source = selection.entry_type, selection.source
        elif classification is not None and classification.entry_type is not None:
            entry_type, type_source = classification.entry_type, TypeSource.CLASSIFIED
        else:
            entry_type, type_source = self._default_entry_type, TypeSource.DEFAULT

        if classification is None:
            return ResolvedType(
                entry_type=entry_type,
                category=self._default_category,
                type_source=type_source,
                category_source=CategorySource.DEFAULT,
                headline=fallback_headline(content),
            )
        return ResolvedType(
            entry_type=entry_type,
            category=classification.category,
            type_source=type_source,
            category_source=(
                CategorySource.DEFAULT
                if classification.category_defaulted
                else CategorySource.CLASSIFIED
            ),
            headline=classification.headline,
            subheading=classification.subheading,
            mood=classification.mood,
        )

    def _classify(self, content: str, document_context: str | None) -> Classification | None:
        try:
            return self._classifier.classify(content, document_context or None)
        except Exception as exc:
            Log.warning(f"Classification unavailable, using defaults: {exc}")
            return None
