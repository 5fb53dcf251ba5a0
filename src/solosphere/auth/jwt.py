"""Session token creation and verification.

Learn: A session token is a JWT signed with the shared secret. It
carries the user's email as the identity claim and expires after
settings.token_expire_hours (5h by default).

Logout only clears the cookie. Nothing is stored server-side, so a
copied token stays valid until its exp claim passes.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from solosphere.config import settings


class TokenError(Exception):
    """Raised when token verification fails."""


def create_session_token(
    email: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed session token for the given identity."""
    now = datetime.now(timezone.utc)
    expires = now + (expires_delta or timedelta(hours=settings.token_expire_hours))
    payload = {
        "email": email,
        "iat": now,
        "exp": expires,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_session_token(token: str) -> dict:
    """Verify and decode a session token.

    Returns the payload dict on success.
    Raises TokenError on failure.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise TokenError(f"Invalid token: {e}")

    if not isinstance(payload.get("email"), str) or not payload["email"]:
        raise TokenError("Token has no identity claim")
    return payload
