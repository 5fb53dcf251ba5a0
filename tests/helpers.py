"""Shared test data and request helpers."""

from solosphere.auth.jwt import create_session_token
from solosphere.config import settings

ALICE = "alice@x.com"
BOB = "bob@x.com"
CAROL = "carol@x.com"


def auth_headers(email: str) -> dict:
    """Cookie header carrying a freshly signed session token for email."""
    token = create_session_token(email)
    return {"Cookie": f"{settings.cookie_name}={token}"}


def job_payload(**overrides) -> dict:
    payload = {
        "title": "Build a landing page",
        "category": "Web Development",
        "deadline": "2026-12-01",
        "description": "Responsive landing page with a signup form.",
        "minPrice": 100,
        "maxPrice": 300,
        "buyerInfo": {"email": ALICE, "name": "Alice", "photo": None},
    }
    payload.update(overrides)
    return payload


def bid_payload(job_id: str, email: str = BOB, **overrides) -> dict:
    payload = {
        "jobId": job_id,
        "email": email,
        "buyer": ALICE,
        "price": 250,
        "comment": "I can start tomorrow.",
        "deadline": "2026-11-20",
        "jobTitle": "Build a landing page",
        "category": "Web Development",
    }
    payload.update(overrides)
    return payload
