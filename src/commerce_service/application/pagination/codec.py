"""Next-key codec.

Token format: urlsafe-base64(json(options)), padding stripped.
The codec only serializes; decoded content is checked by the gate.
"""
from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from typing import Any

from commerce_service.application.exceptions import NextKeyDecodeError


def encode_next_key(options: Mapping[str, Any]) -> str:
    raw = json.dumps(dict(options), separators=(",", ":"))
    token = base64.urlsafe_b64encode(raw.encode()).decode()
    return token.rstrip("=")


def decode_next_key(token: str) -> dict[str, Any]:
    # Restore base64 padding if it was stripped
    padded = token + "=" * ((4 - len(token) % 4) % 4)
    try:
        raw = base64.b64decode(padded.encode(), altchars=b"-_", validate=True).decode()
        data = json.loads(raw)
    except ValueError as exc:
        raise NextKeyDecodeError(f"Malformed next key: {exc}") from exc
    if not isinstance(data, dict):
        raise NextKeyDecodeError("Next key does not hold an object")
    return data
