"""Decode raw lockfile content into a JSON document."""

from __future__ import annotations

import json
from typing import Any

from lockwarden.exceptions import InvalidManifestError


def load_document(raw: bytes | str, source: str = "<manifest>") -> dict[str, Any]:
    """Deserialize *raw* into a JSON object.

    Raises :class:`InvalidManifestError` if *raw* is not valid JSON or the
    top-level value is not an object.
    """
    try:
        document = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise InvalidManifestError(f"Invalid JSON file: {source} ({exc})") from exc

    if not isinstance(document, dict):
        raise InvalidManifestError(
            f"Invalid JSON file: {source} (expected an object at the top level, "
            f"got {type(document).__name__})"
        )
    return document
