"""Shared schema config and write-result descriptors.

Learn: The frontend speaks camelCase JSON (buyerInfo, bidCount, jobId).
CamelModel generates those aliases while still accepting snake_case,
and FastAPI serializes response models by alias.

Write endpoints answer with small result descriptors instead of the
written object: the shape the frontend checks (insertedId, deletedCount).
"""

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InsertResult(CamelModel):
    acknowledged: bool = True
    inserted_id: uuid.UUID


class UpdateResult(CamelModel):
    acknowledged: bool = True
    matched_count: int = 0
    modified_count: int = 0
    upserted_id: Optional[uuid.UUID] = None


class DeleteResult(CamelModel):
    acknowledged: bool = True
    deleted_count: int = 0
