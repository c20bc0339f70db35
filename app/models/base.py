# app/models/base.py
from datetime import datetime, timezone
from typing import Annotated, Any

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator

# ObjectIds are rendered as their 24-char hex string everywhere outside the store.
PyObjectId = Annotated[str, BeforeValidator(str)]


def utcnow() -> datetime:
    # BSON dates have millisecond precision
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_object_id(value: str | ObjectId) -> ObjectId | None:
    """
    Convert a client supplied id to an ObjectId.

    Returns None for malformed ids so callers can treat them like
    any other id that does not resolve.
    """
    if isinstance(value, ObjectId):
        return value
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


class MongoDocument(BaseModel):
    """
    Base for documents read back from a collection.

    `_id` is exposed as `id`.
    """

    id: PyObjectId

    @classmethod
    def from_document(cls, doc: dict[str, Any]):
        data = {k: v for k, v in doc.items() if k != "_id"}
        return cls(id=doc["_id"], **data)
