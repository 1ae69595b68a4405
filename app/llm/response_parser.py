import json

from app.llm.exceptions import ExternalModelError, ExternalModelIncompleteError


def parse_json_object(raw: str) -> dict[str, object]:
    """Parse a model response into a JSON object, tolerating code fences.

    Raises:
        ExternalModelIncompleteError: if the JSON ends before it is complete.
        ExternalModelError: on any other invalid JSON or a non-object document.
    """
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines).strip()

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        if exc.pos >= len(cleaned) or exc.msg.startswith("Unterminated string"):
            raise ExternalModelIncompleteError(
                f"Incomplete JSON response: {exc}. Raw response might be truncated."
            ) from exc
        raise ExternalModelError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise ExternalModelError("JSON response must be an object")
    return parsed
