from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt


def generate_access_token(
    user_id: str,
    secret: str,
    *,
    algorithm: str = "HS256",
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    payload = {
        "userId": user_id,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)
