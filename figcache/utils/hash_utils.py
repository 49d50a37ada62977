"""Hash-related helper utilities."""


import hashlib
import json
from typing import Any, Mapping


def hash_text(text: str) -> str:
    """Stable hex digest of a piece of text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def hash_fields(fields: Mapping[str, Any]) -> str:
    """
    Build a stable hash for a mapping of content fields.

    We use a compact, key-sorted JSON serialization so that dict ordering
    and whitespace never change the digest.
    """
    payload = json.dumps(
        fields,
        ensure_ascii=False,
        sort_keys=True,
        separators=(",", ":"),
        default=str,
    )
    return hash_text(payload)
