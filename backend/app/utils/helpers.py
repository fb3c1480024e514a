import json
import uuid
from typing import List


def new_id() -> str:
    return uuid.uuid4().hex


def file_extension(filename: str | None) -> str:
    if not filename or "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower()


def clean_text_list(values) -> List[str]:
    """Strip every entry and drop the blank ones, keeping order."""
    return [str(item).strip() for item in values or [] if str(item).strip()]


def decode_json_list(raw: str | None) -> list | None:
    """Decode a JSON-encoded form array. Blank input yields None, anything else must be a list."""
    if raw is None or not raw.strip():
        return None
    parsed = json.loads(raw)
    if not isinstance(parsed, list):
        raise ValueError("expected a JSON array")
    return parsed
