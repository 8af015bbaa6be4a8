"""JSON decoding of raw response bodies."""

import json
from typing import Any

from bnetwow.errors import DecodeError


def decode_json(content: bytes, collection_key: str | None = None) -> Any:
    """Decode ``content`` as JSON.

    When ``collection_key`` is given the body must be an object holding a
    list under that key, and the list is returned.
    """
    try:
        payload = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e

    if collection_key is None:
        return payload

    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object holding '{collection_key}'")
    items = payload.get(collection_key)
    if not isinstance(items, list):
        raise DecodeError(f"Expected a list under '{collection_key}'")
    return items
