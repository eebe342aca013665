"""Builds a Classification from a parsed model reply."""

from typing import Any

from journal_capture.classification.exceptions import ClassificationError
from journal_capture.classification.models import Category, Classification, EntryType

_HEADLINE_FALLBACK_CHARS = 50
_DEFAULT_MOOD = "reflective"


def build_classification(
    data: dict[str, Any],
    *,
    content: str,
    default_category: Category,
) -> Classification:
    """Build a Classification, repairing recoverable fields.

    An unknown category becomes ``default_category``; an unknown entry type
    is dropped; a missing headline is derived from the content.

    Raises:
        ClassificationError: when a present field has the wrong JSON type.
    """
    for name in ("headline", "subheading", "mood"):
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ClassificationError(f"'{name}' must be a string")

    category = Category.parse(data.get("category"))
    return Classification(
        category=category or default_category,
        category_defaulted=category is None,
        entry_type=EntryType.parse(data.get("entryType")),
        headline=(data.get("headline") or "").strip() or fallback_headline(content),
        subheading=(data.get("subheading") or "").strip(),
        mood=(data.get("mood") or "").strip() or _DEFAULT_MOOD,
    )


def fallback_headline(content: str) -> str:
    text = content.strip()
    if len(text) <= _HEADLINE_FALLBACK_CHARS:
        return text
    return text[:_HEADLINE_FALLBACK_CHARS] + "..."
