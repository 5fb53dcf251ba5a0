"""Job posting API routes.

Learn: /all-jobs is the public job board. Everything else needs a
session cookie (Depends(get_current_identity)). Mutations of an existing
posting are limited to its buyer: the identity must match the stored
buyerInfo.email, and a PUT body can't hand the posting to someone else.
"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from solosphere.auth.dependencies import CurrentIdentity, get_current_identity
from solosphere.auth.ownership import authorize
from solosphere.db.engine import get_db
from solosphere.schemas.common import DeleteResult, InsertResult, UpdateResult
from solosphere.schemas.job import JobCreate, JobRead
from solosphere.services.job_service import JobInsertConflictError, JobService
from solosphere.services.listing import build_job_query

router = APIRouter()


def _svc(db: AsyncSession = Depends(get_db)) -> JobService:
    return JobService(db)


@router.get("/all-jobs", response_model=list[JobRead])
async def list_all_jobs(
    category: Optional[str] = Query(None, alias="filter", description="Exact category"),
    search: Optional[str] = Query(None, description="Case-insensitive title substring"),
    sort: Optional[str] = Query(None, pattern=r"^(asc|desc)?$", description="Deadline order"),
    svc: JobService = Depends(_svc),
):
    query = build_job_query(category=category, search=search, sort=sort or None)
    return await svc.list_jobs(query)


@router.get("/jobs/{email}", response_model=list[JobRead])
async def list_my_jobs(
    email: str,
    identity: CurrentIdentity = Depends(get_current_identity),
    svc: JobService = Depends(_svc),
):
    """Jobs posted by the authenticated buyer."""
    authorize(identity, email)
    return await svc.list_jobs_by_buyer(email)


@router.get("/job/{job_id}", response_model=Optional[JobRead])
async def get_job(
    job_id: uuid.UUID,
    identity: CurrentIdentity = Depends(get_current_identity),
    svc: JobService = Depends(_svc),
):
    """Any signed-in user may read a posting. Missing ids return null."""
    return await svc.get_job(job_id)


@router.put("/update-job/{job_id}", response_model=UpdateResult)
async def update_job(
    job_id: uuid.UUID,
    body: JobCreate,
    identity: CurrentIdentity = Depends(get_current_identity),
    svc: JobService = Depends(_svc),
):
    """Replace the posting's fields, creating it when the id doesn't exist."""
    authorize(identity, body.buyer_info.email)
    existing = await svc.get_job(job_id)
    if existing is not None:
        authorize(identity, existing.buyer_email)
    try:
        result = await svc.upsert_job(job_id, body, existing=existing)
    except JobInsertConflictError:
        # Lost the insert race: the row exists now, so it gets the update path.
        existing = await svc.get_job(job_id)
        authorize(identity, existing.buyer_email)
        result = await svc.upsert_job(job_id, body, existing=existing)
    await svc.db.commit()
    return result


@router.delete("/job/{job_id}", response_model=DeleteResult)
async def delete_job(
    job_id: uuid.UUID,
    identity: CurrentIdentity = Depends(get_current_identity),
    svc: JobService = Depends(_svc),
):
    job = await svc.get_job(job_id)
    if job is not None:
        authorize(identity, job.buyer_email)
    result = await svc.delete_job(job)
    await svc.db.commit()
    return result


@router.post("/add-job", response_model=InsertResult, status_code=201)
async def add_job(
    body: JobCreate,
    identity: CurrentIdentity = Depends(get_current_identity),
    svc: JobService = Depends(_svc),
):
    result = await svc.create_job(body)
    await svc.db.commit()
    return result
