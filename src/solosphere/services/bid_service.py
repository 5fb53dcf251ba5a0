"""Bid service: placing bids and moving them through their statuses.

Learn: A freelancer may bid on a job once. The service checks for an
existing (email, job_id) bid first so the common case gets a clean
error, and the unique constraint on the table catches two requests
racing past that check. The bid insert and the job's bid_count
increment are flushed in the same session and committed together.
"""

import uuid
from typing import Optional

import structlog
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from solosphere.db.models import Bid, Job
from solosphere.schemas.bid import BidCreate
from solosphere.schemas.common import InsertResult, UpdateResult

logger = structlog.get_logger()


class DuplicateBidError(Exception):
    """Raised when a freelancer has already bid on the job."""


class BidService:
    """Business logic for bids."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_bid(self, email: str, job_id: uuid.UUID) -> Optional[Bid]:
        result = await self.db.execute(
            select(Bid).where(Bid.email == email, Bid.job_id == job_id)
        )
        return result.scalars().first()

    async def get_bid(self, bid_id: uuid.UUID) -> Optional[Bid]:
        return await self.db.get(Bid, bid_id)

    async def job_owner(self, bid: Bid) -> str:
        """Email of the buyer who owns the bid's job.

        Learn: bid.buyer is copied from the client at bid time, so the
        stored job is the authority. It is only trusted once the job has
        been deleted.
        """
        job = await self.db.get(Job, bid.job_id)
        if job is None:
            return bid.buyer
        return job.buyer_email

    async def list_bids(self, email: str, as_buyer: bool = False) -> list[Bid]:
        """Bids received on the identity's jobs (as_buyer) or placed by it."""
        column = Bid.buyer if as_buyer else Bid.email
        result = await self.db.execute(select(Bid).where(column == email))
        return list(result.scalars().all())

    async def create_bid(self, body: BidCreate) -> InsertResult:
        if await self.find_bid(body.email, body.job_id):
            raise DuplicateBidError("You already bid this job!")

        bid = Bid(**body.model_dump(), status="pending")
        self.db.add(bid)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateBidError("You already bid this job!")

        # No-op when the job is gone: job_id is a weak reference
        await self.db.execute(
            update(Job)
            .where(Job.id == body.job_id)
            .values(bid_count=Job.bid_count + 1)
        )
        logger.info(
            "bids.created", bid_id=str(bid.id), job_id=str(bid.job_id), bidder=bid.email
        )
        return InsertResult(inserted_id=bid.id)

    async def update_status(self, bid: Optional[Bid], status: str) -> UpdateResult:
        if bid is None:
            return UpdateResult()
        modified = bid.status != status
        bid.status = status
        await self.db.flush()
        logger.info("bids.status_updated", bid_id=str(bid.id), status=status)
        return UpdateResult(matched_count=1, modified_count=int(modified))
