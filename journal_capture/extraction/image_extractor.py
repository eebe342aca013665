"""AI-powered image extractor."""

from pathlib import Path

from journal_capture.ai.client_base import BaseAIClient
from journal_capture.ai.exceptions import AIClientError
from journal_capture.ai.json_response import parse_json_object
from journal_capture.ai.models import ImageInput
from journal_capture.ai.prompt_loader import load_json_schema, load_prompt_template
from journal_capture.attachments.models import Attachment, AttachmentKind
from journal_capture.extraction.base import BaseImageExtractor
from journal_capture.extraction.exceptions import ExtractionError
from journal_capture.extraction.models import ImageExtraction
from journal_capture.extraction.validator import validate_image_extraction
from journal_capture.logging.logger import Log

SCHEMA_NAME = "image_extraction"


class ImageExtractor(BaseImageExtractor):
    """Asks a vision model what an image shows in the context of the user's note."""

    def __init__(
        self,
        *,
        client: BaseAIClient,
        model: str,
        temperature: float = 0.2,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.5, temperature))
        self._system_prompt = load_prompt_template("image_system_prompt.txt", prompt_dir)
        self._with_note_template = load_prompt_template(
            "image_user_prompt_with_note.txt", prompt_dir
        )
        self._without_note_prompt = load_prompt_template(
            "image_user_prompt_without_note.txt", prompt_dir
        )
        self._json_schema = load_json_schema("image_extraction_schema.json", prompt_dir)

    def extract(self, attachment: Attachment, user_text: str) -> ImageExtraction:
        if attachment.kind is not AttachmentKind.IMAGE:
            raise ExtractionError(f"{attachment.file_name} is not an image")

        prompt = self._build_prompt(user_text)
        Log.debug(f"Image extraction prompt:\n{prompt}", input_index=attachment.input_index)

        try:
            raw_response = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                json_schema=self._json_schema,
                schema_name=SCHEMA_NAME,
                image=ImageInput(data=attachment.raw_bytes, mime_type=attachment.mime_type),
            )
        except AIClientError as exc:
            raise ExtractionError(f"Image extraction failed: {exc}") from exc
        Log.debug(f"AI raw response:\n{raw_response}", input_index=attachment.input_index)

        try:
            parsed = parse_json_object(raw_response)
        except AIClientError as exc:
            raise ExtractionError(str(exc)) from exc
        result = validate_image_extraction(parsed)

        Log.info(
            f"Image extraction complete: {result.image_type}, {len(result.suggested_tags)} tags",
            input_index=attachment.input_index,
        )
        return result

    def _build_prompt(self, user_text: str) -> str:
        note = user_text.strip()
        if not note:
            return self._without_note_prompt
        return self._with_note_template.format(user_text=note)
