"""Bid API routes.

Learn: Every bid route needs a session. A bid has two parties: the
freelancer who placed it (email) and the buyer who owns the job.
Either of them may move its status. The owner is read from the stored
job, not from the bid's client-supplied buyer field.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from solosphere.auth.dependencies import CurrentIdentity, get_current_identity
from solosphere.auth.ownership import authorize, authorize_any
from solosphere.db.engine import get_db
from solosphere.schemas.bid import BidCreate, BidRead, BidStatusUpdate
from solosphere.schemas.common import InsertResult, UpdateResult
from solosphere.services.bid_service import BidService, DuplicateBidError

router = APIRouter()


def _svc(db: AsyncSession = Depends(get_db)) -> BidService:
    return BidService(db)


@router.post("/add-bid", response_model=InsertResult, status_code=201)
async def add_bid(
    body: BidCreate,
    identity: CurrentIdentity = Depends(get_current_identity),
    svc: BidService = Depends(_svc),
):
    """Place a bid and bump the job's bidCount. One bid per freelancer per job."""
    try:
        result = await svc.create_bid(body)
    except DuplicateBidError as e:
        raise HTTPException(status_code=400, detail=str(e))
    await svc.db.commit()
    return result


@router.get("/bids/{email}", response_model=list[BidRead])
async def list_bids(
    email: str,
    buyer: bool = False,
    identity: CurrentIdentity = Depends(get_current_identity),
    svc: BidService = Depends(_svc),
):
    """Bids placed by email, or with ?buyer=true the bid requests it received."""
    authorize(identity, email)
    return await svc.list_bids(email, as_buyer=buyer)


@router.patch("/bid-status-update/{bid_id}", response_model=UpdateResult)
async def update_bid_status(
    bid_id: uuid.UUID,
    body: BidStatusUpdate,
    identity: CurrentIdentity = Depends(get_current_identity),
    svc: BidService = Depends(_svc),
):
    bid = await svc.get_bid(bid_id)
    if bid is not None:
        authorize_any(identity, [bid.email, await svc.job_owner(bid)])
    result = await svc.update_status(bid, body.status)
    await svc.db.commit()
    return result
