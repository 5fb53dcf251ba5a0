"""Job service: business logic for job postings.

Learn: Service layer separates business logic from HTTP routing.
Routes authorize and commit; services read, flush and shape the
write-result descriptors.
"""

import uuid
from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from solosphere.db.models import Job
from solosphere.schemas.common import DeleteResult, InsertResult, UpdateResult
from solosphere.schemas.job import JobCreate
from solosphere.services.listing import JobQuery

logger = structlog.get_logger()


class JobInsertConflictError(Exception):
    """Raised when another request inserted the same job id first."""


class JobService:
    """Business logic for job postings."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ──────────────────────────────────────────

    async def list_jobs(self, query: JobQuery) -> list[Job]:
        result = await self.db.execute(query.apply(select(Job)))
        return list(result.scalars().all())

    async def list_jobs_by_buyer(self, email: str) -> list[Job]:
        result = await self.db.execute(select(Job).where(Job.buyer_email == email))
        return list(result.scalars().all())

    async def get_job(self, job_id: uuid.UUID) -> Optional[Job]:
        return await self.db.get(Job, job_id)

    # ─── Writes ─────────────────────────────────────────

    async def create_job(self, body: JobCreate) -> InsertResult:
        job = Job(**body.column_values(), bid_count=0)
        self.db.add(job)
        await self.db.flush()
        logger.info("jobs.created", job_id=str(job.id), buyer=job.buyer_email)
        return InsertResult(inserted_id=job.id)

    async def upsert_job(
        self,
        job_id: uuid.UUID,
        body: JobCreate,
        existing: Optional[Job],
    ) -> UpdateResult:
        """Overwrite the posting's fields, inserting it under job_id if missing.

        Learn: bid_count is not part of the body, so an update keeps the
        current count and an inserted posting starts at zero. When a
        concurrent request inserts the same id first, the primary key
        rejects ours and JobInsertConflictError tells the caller to re-read
        the row and update it instead.
        """
        if existing is None:
            job = Job(id=job_id, **body.column_values(), bid_count=0)
            self.db.add(job)
            try:
                await self.db.flush()
            except IntegrityError:
                await self.db.rollback()
                raise JobInsertConflictError(f"Job {job_id} already exists")
            logger.info("jobs.upserted", job_id=str(job_id), buyer=job.buyer_email)
            return UpdateResult(upserted_id=job_id)

        modified = False
        for key, value in body.column_values().items():
            if getattr(existing, key) != value:
                setattr(existing, key, value)
                modified = True
        await self.db.flush()
        logger.info("jobs.updated", job_id=str(job_id), modified=modified)
        return UpdateResult(matched_count=1, modified_count=int(modified))

    async def delete_job(self, job: Optional[Job]) -> DeleteResult:
        if job is None:
            return DeleteResult(deleted_count=0)
        await self.db.delete(job)
        await self.db.flush()
        logger.info("jobs.deleted", job_id=str(job.id))
        return DeleteResult(deleted_count=1)
