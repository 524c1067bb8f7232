# ai/extractor.py
import json
import re
from typing import Any

from pydantic import TypeAdapter, ValidationError

# first ```json fenced block wins
FENCED_JSON = re.compile(r"```json[ \t]*\r?\n(.*?)\r?\n\s*```", re.DOTALL)


class MalformedResponseError(ValueError):
    """Model output that is not JSON, or JSON of the wrong shape."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw[:500]


def extract_json(text: str) -> Any:
    """
    Pull the JSON payload out of a model reply: the interior of the first
    ```json block if there is one, otherwise the whole reply.
    """
    if text is None:
        raise MalformedResponseError("empty model response")
    text = text.strip()
    m = FENCED_JSON.search(text)
    payload = m.group(1) if m else text
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"model response is not valid JSON: {e}", text) from e


def validate_payload(data: Any, type_: Any, raw: str = "") -> Any:
    """Validate already-extracted JSON against a pydantic type."""
    try:
        return TypeAdapter(type_).validate_python(data)
    except ValidationError as e:
        raise MalformedResponseError(
            f"model response failed validation: {e.error_count()} error(s)", raw
        ) from e


def parse_payload(text: str, type_: Any) -> Any:
    return validate_payload(extract_json(text), type_, text)
