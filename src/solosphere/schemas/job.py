"""Pydantic schemas for job postings."""

import datetime as dt
import uuid
from typing import Optional

from pydantic import ConfigDict, Field, model_validator

from solosphere.schemas.common import CamelModel


class BuyerInfo(CamelModel):
    email: str = Field(..., min_length=3, max_length=254)
    name: Optional[str] = Field(None, max_length=200)
    photo: Optional[str] = None


class JobCreate(CamelModel):
    """Body for POST /add-job and PUT /update-job/{id}.

    Learn: PUT sends the full posting, so create and update share a schema.
    bidCount is never accepted from clients: only bids move it.
    """

    title: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., min_length=1, max_length=100)
    deadline: dt.date
    description: Optional[str] = None
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)
    buyer_info: BuyerInfo

    @model_validator(mode="after")
    def check_price_range(self):
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.max_price < self.min_price
        ):
            raise ValueError("maxPrice must be greater than or equal to minPrice")
        return self

    def column_values(self) -> dict:
        """Flatten into Job column values."""
        values = self.model_dump(exclude={"buyer_info"})
        values["buyer_email"] = self.buyer_info.email
        values["buyer_name"] = self.buyer_info.name
        values["buyer_photo"] = self.buyer_info.photo
        return values


class JobRead(CamelModel):
    id: uuid.UUID
    title: str
    category: str
    deadline: dt.date
    description: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    buyer_info: BuyerInfo
    bid_count: int
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)
