from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    STORY = "story"
    ACTION = "action"
    NOTE = "note"

    @classmethod
    def parse(cls, value: object) -> "EntryType | None":
        """Return the matching EntryType, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class Category(str, Enum):
    """Life-area category of an entry."""

    BUSINESS = "Business"
    FINANCE = "Finance"
    HEALTH = "Health"
    SPIRITUAL = "Spiritual"
    FUN = "Fun"
    SOCIAL = "Social"
    ROMANCE = "Romance"

    @classmethod
    def parse(cls, value: object) -> "Category | None":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        wanted = value.strip().lower()
        for category in cls:
            if category.value.lower() == wanted:
                return category
        return None


@dataclass(frozen=True)
class Classification:
    """Output of the content classification service."""

    category: Category
    headline: str
    entry_type: EntryType | None = None
    subheading: str = ""
    mood: str = "reflective"
    # the reply named no known category and default_category was used
    category_defaulted: bool = False
