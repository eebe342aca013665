"""Validates a parsed image extraction reply against domain invariants."""

from typing import Any

from journal_capture.classification.models import EntryType
from journal_capture.extraction.exceptions import ExtractionValidationError
from journal_capture.extraction.models import (
    ExtractedText,
    ImageExtraction,
    PrimaryContent,
    Purchase,
    UserConnectionAnalysis,
)

_MAX_TAGS = 10
_VALID_IMAGE_TYPES = frozenset({
    "screenshot", "photo", "receipt", "document", "message", "social", "media", "playlist", "unknown",
})
_VALID_CONTENT_TYPES = frozenset({"text", "list", "product", "receipt", "image", "mixed"})


def validate_image_extraction(data: dict[str, Any]) -> ImageExtraction:
    """Validate a raw parsed reply and build an ImageExtraction.

    Raises:
        ExtractionValidationError: on any validation failure.
    """
    narrative = data.get("combinedNarrative")
    if not isinstance(narrative, str) or not narrative.strip():
        raise ExtractionValidationError("'combinedNarrative' must be a non-empty string")

    image_type = data.get("imageType", "unknown")
    if image_type not in _VALID_IMAGE_TYPES:
        raise ExtractionValidationError(
            f"'imageType' must be one of {sorted(_VALID_IMAGE_TYPES)}, got {image_type!r}"
        )

    return ImageExtraction(
        image_type=image_type,
        combined_narrative=narrative.strip(),
        primary_content=_build_primary_content(data.get("primaryContent")),
        extracted_text=_build_extracted_text(data.get("extractedText")),
        purchase=_build_purchase(data.get("purchase")),
        user_connection=_build_user_connection(data.get("userConnectionAnalysis")),
        suggested_tags=_build_tags(data.get("suggestedTags")),
        suggested_entry_type=_build_entry_type(data.get("suggestedEntryType")),
    )


def _require_object(raw: Any, name: str) -> dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ExtractionValidationError(f"'{name}' must be an object")
    return raw


def _string_list(raw: Any, name: str) -> list[str]:
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ExtractionValidationError(f"'{name}' must be a list of strings")
    return [item.strip() for item in raw if item.strip()]


def _optional_string(raw: Any, name: str) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ExtractionValidationError(f"'{name}' must be a string or null")
    return raw.strip() or None


def _build_primary_content(raw: Any) -> PrimaryContent:
    obj = _require_object(raw, "primaryContent")
    content_type = obj.get("type", "image")
    if content_type not in _VALID_CONTENT_TYPES:
        raise ExtractionValidationError(
            f"'primaryContent.type' must be one of {sorted(_VALID_CONTENT_TYPES)}, "
            f"got {content_type!r}"
        )
    context = obj.get("context", "")
    if not isinstance(context, str):
        raise ExtractionValidationError("'primaryContent.context' must be a string")
    return PrimaryContent(
        type=content_type,
        items=_string_list(obj.get("items"), "primaryContent.items"),
        context=context.strip(),
    )


def _build_extracted_text(raw: Any) -> ExtractedText:
    obj = _require_object(raw, "extractedText")
    return ExtractedText(
        relevant=_string_list(obj.get("relevant"), "extractedText.relevant"),
        titles=_string_list(obj.get("titles"), "extractedText.titles"),
        details=_string_list(obj.get("details"), "extractedText.details"),
    )


def _build_purchase(raw: Any) -> Purchase:
    obj = _require_object(raw, "purchase")
    detected = obj.get("detected", False)
    if not isinstance(detected, bool):
        raise ExtractionValidationError("'purchase.detected' must be a boolean")
    price = obj.get("price")
    if price is not None and (isinstance(price, bool) or not isinstance(price, (int, float))):
        raise ExtractionValidationError("'purchase.price' must be a number or null")
    currency = obj.get("currency") or "USD"
    if not isinstance(currency, str):
        raise ExtractionValidationError("'purchase.currency' must be a string")
    return Purchase(
        detected=detected,
        product_name=_optional_string(obj.get("productName"), "purchase.productName"),
        price=float(price) if price is not None else None,
        currency=currency,
        seller=_optional_string(obj.get("seller"), "purchase.seller"),
        order_date=_optional_string(obj.get("orderDate"), "purchase.orderDate"),
        category=_optional_string(obj.get("category"), "purchase.category"),
    )


def _build_user_connection(raw: Any) -> UserConnectionAnalysis:
    obj = _require_object(raw, "userConnectionAnalysis")
    noticed = obj.get("whatTheyNoticedAbout", "")
    matters = obj.get("whyItMatters", "")
    if not isinstance(noticed, str) or not isinstance(matters, str):
        raise ExtractionValidationError(
            "'userConnectionAnalysis' text fields must be strings"
        )
    return UserConnectionAnalysis(
        what_they_noticed_about=noticed.strip(),
        why_it_matters=matters.strip(),
        key_elements=_string_list(obj.get("keyElements"), "userConnectionAnalysis.keyElements"),
    )


def _build_tags(raw: Any) -> list[str]:
    tags = _string_list(raw, "suggestedTags")
    if len(tags) > _MAX_TAGS:
        raise ExtractionValidationError(f"Too many tags: {len(tags)} (max {_MAX_TAGS})")
    return [tag.lower() for tag in tags]


def _build_entry_type(raw: Any) -> EntryType | None:
    if raw is None:
        return None
    entry_type = EntryType.parse(raw)
    if entry_type is None:
        raise ExtractionValidationError(
            f"'suggestedEntryType' must be one of {[t.value for t in EntryType]} or null, "
            f"got {raw!r}"
        )
    return entry_type
