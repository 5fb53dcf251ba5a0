"""FastAPI auth dependencies: the access gate.

Learn: Protected routes declare Depends(get_current_identity). FastAPI
resolves dependencies before the handler body runs, so a missing or
invalid cookie raises 401 and the handler never executes. Verification
is a plain synchronous call: the identity is only returned after the
signature and expiry checks have passed.
"""

from typing import Optional

import structlog
from fastapi import Cookie, HTTPException, Request

from solosphere.auth.jwt import TokenError, verify_session_token
from solosphere.config import settings

logger = structlog.get_logger()


class CurrentIdentity:
    """The authenticated identity making the request."""

    def __init__(self, email: str):
        self.email = email

    def __repr__(self) -> str:
        return f"CurrentIdentity(email={self.email!r})"


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=401, detail="Unauthorized access")


async def get_current_identity(
    request: Request,
    token: Optional[str] = Cookie(None, alias=settings.cookie_name),
) -> CurrentIdentity:
    """Verify the session cookie and return the caller's identity (401 otherwise)."""
    if not token:
        logger.info("auth.token_rejected", reason="missing", path=request.url.path)
        raise _unauthorized()

    try:
        payload = verify_session_token(token)
    except TokenError as e:
        logger.info("auth.token_rejected", reason=str(e), path=request.url.path)
        raise _unauthorized()

    identity = CurrentIdentity(email=payload["email"])
    structlog.contextvars.bind_contextvars(identity=identity.email)
    return identity
