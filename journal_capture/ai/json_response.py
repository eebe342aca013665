import json

from journal_capture.ai.exceptions import AIClientError


def parse_json_object(raw: str) -> dict[str, object]:
    """Parse a model reply into a JSON object, tolerating markdown code fences.

    Raises:
        AIClientError: the reply is not valid JSON or not an object.
    """
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise AIClientError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise AIClientError("JSON response must be an object")
    return parsed
