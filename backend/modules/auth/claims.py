"""
Unverified token claim decoding.

Shows what a token claims about itself. Only the payload segment is read
and the signature is NOT checked, so nothing here may be used for access
decisions.
"""

import json
from datetime import datetime, timezone
from typing import Any, Optional

from jwt.utils import base64url_decode

from .models import TokenClaims

DECODE_ERROR = "Failed to decode JWT"


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _timestamp(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def decode_unverified_claims(
    token: str,
    now: Optional[datetime] = None,
) -> TokenClaims:
    """
    Decode the payload segment of a three-part token.

    Args:
        token: The bearer token
        now: Current time (defaults to UTC now)

    Returns:
        TokenClaims with the decoded fields, or with ``error`` set when
        the token cannot be decoded
    """
    parts = token.split(".")
    if len(parts) != 3:
        return TokenClaims(error=DECODE_ERROR)

    now = now or datetime.now(timezone.utc)

    try:
        payload = json.loads(base64url_decode(parts[1]))
        if not isinstance(payload, dict):
            return TokenClaims(error=DECODE_ERROR)

        exp = _timestamp(payload.get("exp"))
        expired = False
        expires_at = None
        if exp:
            expired = exp * 1000 < now.timestamp() * 1000
            expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)

        return TokenClaims(
            sub=_text(payload.get("sub")),
            email=_text(payload.get("email")),
            role=_text(payload.get("role")),
            exp=int(exp) if exp is not None else None,
            expired=expired,
            expires_at=expires_at,
        )
    except (ValueError, OverflowError, OSError):
        # ValueError covers bad base64, bad UTF-8, bad JSON and model validation
        return TokenClaims(error=DECODE_ERROR)
