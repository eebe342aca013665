import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from journal_capture.ai.exceptions import AIClientError
from journal_capture.classification.classifier import SCHEMA_NAME, ContentClassifier
from journal_capture.classification.exceptions import ClassificationError
from journal_capture.classification.models import Category, EntryType

_REPLY = json.dumps({
    "entryType": "note",
    "category": "Romance",
    "headline": "Anniversary Dinner",
    "subheading": "",
    "mood": "grateful",
})


def _make_classifier(client: MagicMock, prompt_dir: Path | None = None) -> ContentClassifier:
    return ContentClassifier(
        client=client,
        model="text-model",
        temperature=0.3,
        default_category=Category.FUN,
        prompt_dir=prompt_dir,
    )


def _write_prompts(prompt_dir: Path) -> None:
    (prompt_dir / "classification_system_prompt.txt").write_text("system", encoding="utf-8")
    (prompt_dir / "classification_prompt.txt").write_text(
        "C={content}{document_context_block}", encoding="utf-8"
    )
    (prompt_dir / "classification_document_context.txt").write_text(
        "|D={document_context}", encoding="utf-8"
    )
    (prompt_dir / "classification_schema.json").write_text('{"type": "object"}', encoding="utf-8")


class TestContentClassifier:
    def test_returns_classification(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _REPLY
        result = _make_classifier(client).classify("Dinner with Sam")
        assert result.entry_type is EntryType.NOTE
        assert result.category is Category.ROMANCE
        assert result.headline == "Anniversary Dinner"
        assert result.mood == "grateful"

    def test_sends_text_only_request(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _REPLY
        _make_classifier(client).classify("Dinner with Sam")
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "text-model"
        assert kwargs["schema_name"] == SCHEMA_NAME
        assert "image" not in kwargs

    def test_prompt_without_document_context(self, tmp_path: Path) -> None:
        _write_prompts(tmp_path)
        client = MagicMock()
        client.create_chat_completion.return_value = _REPLY
        _make_classifier(client, tmp_path).classify(" hello ")
        assert client.create_chat_completion.call_args.kwargs["user_prompt"] == "C=hello"

    def test_prompt_with_truncated_document_context(self, tmp_path: Path) -> None:
        _write_prompts(tmp_path)
        client = MagicMock()
        client.create_chat_completion.return_value = _REPLY
        _make_classifier(client, tmp_path).classify("hello", "d" * 5000)
        prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert prompt == "C=hello|D=" + "d" * 4000

    def test_empty_content_raises_without_calling_client(self) -> None:
        client = MagicMock()
        with pytest.raises(ClassificationError, match="Content is required"):
            _make_classifier(client).classify("   ")
        client.create_chat_completion.assert_not_called()

    def test_client_error_becomes_classification_error(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = AIClientError("rate limited")
        with pytest.raises(ClassificationError, match="rate limited"):
            _make_classifier(client).classify("hello")

    def test_unparseable_reply_becomes_classification_error(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "<html>"
        with pytest.raises(ClassificationError, match="Invalid JSON"):
            _make_classifier(client).classify("hello")
