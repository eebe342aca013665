import base64

import httpx
import openai

from journal_capture.ai.client_base import BaseAIClient
from journal_capture.ai.exceptions import AIClientError, AIClientNetworkError
from journal_capture.ai.models import ImageInput


class OpenAIClientAdapter(BaseAIClient):
    """AI client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

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
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": schema_name,
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": self._user_content(user_prompt, image)},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AIClientNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIClientNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AIClientError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AIClientError("AI returned empty response")
        return content

    @staticmethod
    def _user_content(
        user_prompt: str, image: ImageInput | None
    ) -> str | list[dict[str, object]]:
        if image is None:
            return user_prompt
        encoded = base64.b64encode(image.data).decode("ascii")
        return [
            {
                "type": "image_url",
                "image_url": {"url": f"data:{image.mime_type};base64,{encoded}"},
            },
            {"type": "text", "text": user_prompt},
        ]
