import json
from pathlib import Path

from journal_capture.ai.exceptions import AIClientError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a prompt template bundled with the package.

    Args:
        name: File name inside the prompt directory, e.g. ``image_system_prompt.txt``.
        prompt_dir: Directory to read from. Defaults to the bundled prompts.

    Returns:
        The raw template string with placeholders.

    Raises:
        AIClientError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AIClientError(f"Failed to load prompt template {name}: {exc}") from exc


def load_json_schema(name: str, prompt_dir: Path | None = None) -> dict[str, object]:
    """Load and parse a bundled JSON schema.

    Raises:
        AIClientError: if the file cannot be read or is not a JSON object.
    """
    raw = load_prompt_template(name, prompt_dir)
    try:
        schema = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AIClientError(f"Invalid JSON schema {name}: {exc}") from exc
    if not isinstance(schema, dict):
        raise AIClientError(f"JSON schema {name} must be an object")
    return schema
