"""Example AI client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAIClient and register the provider in AIClientFactory.
"""

import json
from typing import ClassVar

from journal_capture.ai.client_base import BaseAIClient
from journal_capture.ai.exceptions import AIClientError
from journal_capture.ai.models import ImageInput


class ExampleClientAdapter(BaseAIClient):
    """Example adapter that returns a fixed valid JSON reply per schema.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_RESPONSES: ClassVar[dict[str, dict[str, object]]] = {
        "image_extraction": {
            "imageType": "photo",
            "primaryContent": {"type": "image", "items": [], "context": "An attached photo"},
            "extractedText": {"relevant": [], "titles": [], "details": []},
            "purchase": {
                "detected": False,
                "productName": None,
                "price": None,
                "currency": "USD",
                "seller": None,
                "orderDate": None,
                "category": None,
            },
            "userConnectionAnalysis": {
                "whatTheyNoticedAbout": "",
                "whyItMatters": "",
                "keyElements": [],
            },
            "suggestedTags": [],
            "suggestedEntryType": None,
            "combinedNarrative": "I saved this photo to remember the moment.",
        },
        "content_classification": {
            "entryType": "story",
            "category": "Fun",
            "headline": "A Moment Worth Keeping",
            "subheading": "",
            "mood": "reflective",
        },
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        schema_name: str,
        image: ImageInput | None = None,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema, image
        response = self.DEFAULT_RESPONSES.get(schema_name)
        if response is None:
            raise AIClientError(f"No example response for schema '{schema_name}'")
        return json.dumps(response)
