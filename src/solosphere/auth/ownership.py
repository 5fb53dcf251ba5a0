"""Ownership checks for path- and resource-scoped operations.

Learn: Authentication answers "who are you"; these answer "is this
yours". Handlers call them before touching the database for "my jobs"
and "my bids", and before mutating an existing job or bid.
"""

from collections.abc import Iterable

import structlog
from fastapi import HTTPException

from solosphere.auth.dependencies import CurrentIdentity

logger = structlog.get_logger()


def authorize(identity: CurrentIdentity, owner_email: str) -> None:
    """Allow when the identity is the owner, else raise 403."""
    authorize_any(identity, [owner_email])


def authorize_any(identity: CurrentIdentity, owner_emails: Iterable[str]) -> None:
    """Allow when the identity matches any of the owners (e.g. bidder or buyer)."""
    owners = list(owner_emails)
    if identity.email in owners:
        return
    logger.warning("auth.forbidden", identity=identity.email, owners=owners)
    raise HTTPException(status_code=403, detail="Forbidden access")
