"""Session API: issue and clear the session cookie.

Learn: POST /jwt is the only way to get a session. It doesn't check a
password: the frontend signs users in with its identity provider and
then exchanges the email for our cookie. The cookie flags depend on
the environment: production serves the frontend from another site,
so the cookie must be Secure and SameSite=None to travel cross-site.
"""

import structlog
from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from solosphere.auth.jwt import create_session_token
from solosphere.config import settings

logger = structlog.get_logger()

router = APIRouter()


class TokenRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)


class SessionResponse(BaseModel):
    success: bool
    message: str


def _cookie_flags() -> dict:
    if settings.is_production:
        return {"httponly": True, "secure": True, "samesite": "none"}
    return {"httponly": True, "secure": False, "samesite": "strict"}


@router.post("/jwt", response_model=SessionResponse)
async def issue_token(body: TokenRequest, response: Response):
    """Mint a session token for the email and set it as the session cookie."""
    token = create_session_token(body.email)
    response.set_cookie(settings.cookie_name, token, **_cookie_flags())
    logger.info("auth.token_issued", identity=body.email)
    return SessionResponse(success=True, message="Cookie has been sent")


@router.post("/logout", response_model=SessionResponse)
async def logout(response: Response):
    """Clear the session cookie. The token itself stays valid until it expires."""
    response.delete_cookie(settings.cookie_name, **_cookie_flags())
    return SessionResponse(success=True, message="Cookie has been removed")
