"""AI-powered journal content classifier."""

from pathlib import Path

from journal_capture.ai.client_base import BaseAIClient
from journal_capture.ai.exceptions import AIClientError
from journal_capture.ai.json_response import parse_json_object
from journal_capture.ai.prompt_loader import load_json_schema, load_prompt_template
from journal_capture.classification.base import BaseClassifier
from journal_capture.classification.exceptions import ClassificationError
from journal_capture.classification.models import Category, Classification
from journal_capture.classification.validator import build_classification
from journal_capture.logging.logger import Log

SCHEMA_NAME = "content_classification"
_MAX_DOCUMENT_CONTEXT_CHARS = 4000


class ContentClassifier(BaseClassifier):
    """Classifies entry content into an entry type and life-area category."""

    def __init__(
        self,
        *,
        client: BaseAIClient,
        model: str,
        temperature: float = 0.2,
        default_category: Category = Category.FUN,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.5, temperature))
        self._default_category = default_category
        self._system_prompt = load_prompt_template("classification_system_prompt.txt", prompt_dir)
        self._prompt_template = load_prompt_template("classification_prompt.txt", prompt_dir)
        self._context_template = load_prompt_template(
            "classification_document_context.txt", prompt_dir
        )
        self._json_schema = load_json_schema("classification_schema.json", prompt_dir)

    def classify(self, content: str, document_context: str | None = None) -> Classification:
        if not content.strip():
            raise ClassificationError("Content is required")

        prompt = self._build_prompt(content, document_context)
        Log.debug(f"Classification prompt:\n{prompt}")

        try:
            raw_response = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                json_schema=self._json_schema,
                schema_name=SCHEMA_NAME,
            )
            Log.debug(f"AI raw response:\n{raw_response}")
            parsed = parse_json_object(raw_response)
        except AIClientError as exc:
            raise ClassificationError(f"Classification failed: {exc}") from exc

        result = build_classification(
            parsed, content=content, default_category=self._default_category
        )
        Log.info(
            f"Classification complete: {result.category.value}, "
            f"{result.entry_type.value if result.entry_type else 'no type'}"
        )
        return result

    def _build_prompt(self, content: str, document_context: str | None) -> str:
        context = (document_context or "").strip()
        block = ""
        if context:
            block = self._context_template.format(
                document_context=context[:_MAX_DOCUMENT_CONTEXT_CHARS]
            )
        return self._prompt_template.format(
            content=content.strip(), document_context_block=block
        )
