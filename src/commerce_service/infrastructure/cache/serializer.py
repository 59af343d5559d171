from __future__ import annotations

import json
import re
from datetime import datetime
from typing import Any
from uuid import UUID

# Only full ISO-8601 timestamps are revived; plain dates stay strings.
_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})?$")


class _Encoder(json.JSONEncoder):
    def default(self, o: object) -> Any:
        if isinstance(o, UUID):
            return str(o)
        if isinstance(o, datetime):
            return o.isoformat()
        return super().default(o)


def _revive(value: Any) -> Any:
    if isinstance(value, str) and _DATETIME_RE.match(value):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, list):
        return [_revive(v) for v in value]
    if isinstance(value, dict):
        return {k: _revive(v) for k, v in value.items()}
    return value


def dumps(value: Any) -> str:
    return json.dumps(value, cls=_Encoder)


def loads(raw: str | bytes) -> Any:
    return _revive(json.loads(raw))
