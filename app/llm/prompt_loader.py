import json
from pathlib import Path

from app.llm.exceptions import ExternalModelError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template from a file.

    Args:
        name: Bundled template name, e.g. ``extraction`` for
              ``prompts/extraction_prompt.txt``.
        path: Explicit template path; overrides *name*.

    Returns:
        The raw template string with placeholders.

    Raises:
        ExternalModelError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExternalModelError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(name: str, path: Path | None = None) -> dict[str, object]:
    """Load a response JSON schema.

    Raises:
        ExternalModelError: if the file cannot be read or is not a JSON object.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{name}_schema.json"
    try:
        schema = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ExternalModelError(f"Failed to load JSON schema: {exc}") from exc
    if not isinstance(schema, dict):
        raise ExternalModelError(f"JSON schema {path} must be an object")
    return schema
