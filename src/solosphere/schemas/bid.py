"""Pydantic schemas for bids."""

import datetime as dt
import uuid
from typing import Literal, Optional

from pydantic import ConfigDict, Field

from solosphere.schemas.common import CamelModel

BidStatus = Literal["pending", "accepted", "in_progress", "rejected", "completed"]


class BidCreate(CamelModel):
    """Body for POST /add-bid. New bids always start as pending."""

    job_id: uuid.UUID
    email: str = Field(..., min_length=3, max_length=254)
    buyer: str = Field(..., min_length=3, max_length=254)
    price: Optional[float] = Field(None, ge=0)
    comment: Optional[str] = None
    deadline: Optional[dt.date] = None
    job_title: Optional[str] = Field(None, max_length=200)
    category: Optional[str] = Field(None, max_length=100)


class BidStatusUpdate(CamelModel):
    status: BidStatus


class BidRead(CamelModel):
    id: uuid.UUID
    job_id: uuid.UUID
    email: str
    buyer: str
    price: Optional[float] = None
    comment: Optional[str] = None
    deadline: Optional[dt.date] = None
    job_title: Optional[str] = None
    category: Optional[str] = None
    status: BidStatus
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)
