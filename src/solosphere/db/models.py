"""SQLAlchemy ORM models: single source of truth for the database schema.

Learn: Declarative ORM mapping with SQLAlchemy 2.0 style (Mapped[] + mapped_column).
Column types are the portable ones (Uuid, Date, Float) so the same models
run on PostgreSQL in production and SQLite in tests.

Key concepts:
- A job is owned by the buyer whose email is stored in buyer_email.
- Bid.job_id is a plain column, not a foreign key: bids keep pointing at
  a job id even after the job is deleted.
- (email, job_id) is unique on bids: one bid per freelancer per job.
"""

import datetime as dt
import uuid
from typing import Optional

from sqlalchemy import (
    Date,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


def new_uuid() -> uuid.UUID:
    return uuid.uuid4()


class Job(Base):
    """A job posting.

    Learn: buyerInfo is nested on the wire but flattened into buyer_*
    columns here, so "jobs posted by X" is an indexed equality lookup.
    """

    __tablename__ = "jobs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    deadline: Mapped[dt.date] = mapped_column(Date, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    min_price: Mapped[Optional[float]] = mapped_column(Float)
    max_price: Mapped[Optional[float]] = mapped_column(Float)
    buyer_email: Mapped[str] = mapped_column(String(254), nullable=False)
    buyer_name: Mapped[Optional[str]] = mapped_column(String(200))
    buyer_photo: Mapped[Optional[str]] = mapped_column(Text)
    bid_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    __table_args__ = (
        Index("ix_jobs_buyer_email", "buyer_email"),
        Index("ix_jobs_category", "category"),
    )
    __mapper_args__ = {"eager_defaults": True}

    @property
    def buyer_info(self) -> dict:
        return {
            "email": self.buyer_email,
            "name": self.buyer_name,
            "photo": self.buyer_photo,
        }


class Bid(Base):
    """A freelancer's bid on a job."""

    __tablename__ = "bids"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=new_uuid)
    job_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    buyer: Mapped[str] = mapped_column(String(254), nullable=False)
    price: Mapped[Optional[float]] = mapped_column(Float)
    comment: Mapped[Optional[str]] = mapped_column(Text)
    deadline: Mapped[Optional[dt.date]] = mapped_column(Date)
    job_title: Mapped[Optional[str]] = mapped_column(String(200))
    category: Mapped[Optional[str]] = mapped_column(String(100))
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint("email", "job_id", name="uq_bids_email_job"),
        Index("ix_bids_buyer", "buyer"),
    )
    __mapper_args__ = {"eager_defaults": True}
