"""Decoding of JSON-encoded array fields submitted in multipart forms."""

import json
from typing import List

from app.errors import ValidationError
from app.utils.helpers import decode_json_list


def parse_string_list(raw: str | None, field: str) -> List[str] | None:
    """Return the decoded list of strings, or None when the field was not submitted."""
    try:
        values = decode_json_list(raw)
    except (json.JSONDecodeError, ValueError):
        raise ValidationError(f"malformed list: {field}")
    if values is None:
        return None
    if not all(isinstance(item, str) for item in values):
        raise ValidationError(f"malformed list: {field}")
    return values
