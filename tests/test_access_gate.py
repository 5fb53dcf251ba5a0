"""Access gate and ownership tests.

Learn: Every protected route must answer 401 before its handler runs
when the session cookie is missing or bad, and 403 when a path-scoped
email isn't the caller's. The mutation tests check the database
afterwards: a rejected request must leave no trace.
"""

from datetime import timedelta

import pytest
from sqlalchemy import func, select

from solosphere.auth.jwt import create_session_token
from solosphere.config import settings
from solosphere.db.models import Bid, Job
from tests.helpers import ALICE, BOB, bid_payload, job_payload

PROTECTED = [
    ("GET", f"/jobs/{ALICE}", None),
    ("GET", "/job/00000000-0000-0000-0000-000000000001", None),
    ("PUT", "/update-job/00000000-0000-0000-0000-000000000001", job_payload()),
    ("DELETE", "/job/00000000-0000-0000-0000-000000000001", None),
    ("POST", "/add-job", job_payload()),
    ("POST", "/add-bid", bid_payload("00000000-0000-0000-0000-000000000001")),
    ("GET", f"/bids/{ALICE}", None),
    ("PATCH", "/bid-status-update/00000000-0000-0000-0000-000000000001", {"status": "accepted"}),
]


def _cookie(token: str) -> dict:
    return {"Cookie": f"{settings.cookie_name}={token}"}


async def _count(session_factory, model) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


# ═══════════════════════════════════════════════════════════
# 401: no valid session
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path,body", PROTECTED)
async def test_protected_route_without_token(client, method, path, body):
    r = await client.request(method, path, json=body)
    assert r.status_code == 401
    assert r.json() == {"detail": "Unauthorized access"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path,body", PROTECTED)
async def test_protected_route_with_expired_token(client, method, path, body):
    token = create_session_token(ALICE, expires_delta=timedelta(seconds=-1))
    r = await client.request(method, path, json=body, headers=_cookie(token))
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_tampered_token_rejected(client):
    token = create_session_token(ALICE)
    header, payload, signature = token.split(".")
    tampered = f"{header}.{payload}.{signature[::-1]}"
    r = await client.get(f"/jobs/{ALICE}", headers=_cookie(tampered))
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_empty_token_rejected(client):
    r = await client.get(f"/jobs/{ALICE}", headers=_cookie(""))
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_rejected_add_job_writes_nothing(client, session_factory):
    r = await client.post("/add-job", json=job_payload())
    assert r.status_code == 401
    assert await _count(session_factory, Job) == 0


@pytest.mark.asyncio
async def test_malformed_json_without_token_is_422_and_writes_nothing(client, session_factory):
    """FastAPI decodes the JSON body before resolving dependencies, so
    an unparseable body answers 422 ahead of the cookie check. The
    handler still never runs."""
    r = await client.post(
        "/add-job", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert r.status_code == 422
    assert await _count(session_factory, Job) == 0


@pytest.mark.asyncio
async def test_rejected_add_bid_writes_nothing(client, session_factory, posted_job):
    expired = create_session_token(BOB, expires_delta=timedelta(seconds=-1))
    r = await client.post("/add-bid", json=bid_payload(posted_job), headers=_cookie(expired))
    assert r.status_code == 401
    assert await _count(session_factory, Bid) == 0

    r = await client.get(f"/jobs/{ALICE}", headers=_cookie(create_session_token(ALICE)))
    assert r.json()[0]["bidCount"] == 0


@pytest.mark.asyncio
async def test_rejected_update_and_delete_leave_job_untouched(client, posted_job):
    r = await client.put(
        f"/update-job/{posted_job}", json=job_payload(title="Hijacked")
    )
    assert r.status_code == 401
    r = await client.delete(f"/job/{posted_job}")
    assert r.status_code == 401

    r = await client.get(f"/job/{posted_job}", headers=_cookie(create_session_token(ALICE)))
    assert r.json()["title"] == "Build a landing page"


# ═══════════════════════════════════════════════════════════
# 403: identity doesn't match the path
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
@pytest.mark.parametrize("path", [f"/jobs/{ALICE}", f"/bids/{ALICE}", f"/bids/{ALICE}?buyer=true"])
async def test_path_scoped_routes_forbid_other_identity(client, path):
    r = await client.get(path, headers=_cookie(create_session_token(BOB)))
    assert r.status_code == 403
    assert r.json() == {"detail": "Forbidden access"}
