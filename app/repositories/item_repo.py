# app/repositories/item_repo.py
from typing import Any

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database

from app.models.base import parse_object_id, utcnow
from app.models.item import ITEMS, Item


class ItemRepository:
    """
    Data access layer for Item.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def get_by_id(self, db: Database, item_id: str) -> Item | None:
        oid = parse_object_id(item_id)
        if oid is None:
            return None
        doc = db[ITEMS].find_one({"_id": oid})
        return Item.from_document(doc) if doc else None

    def list(self, db: Database) -> list[Item]:
        # _id breaks ties between items created in the same millisecond
        cursor = db[ITEMS].find().sort([("created_at", DESCENDING), ("_id", DESCENDING)])
        return [Item.from_document(doc) for doc in cursor]

    def create(self, db: Database, data: dict[str, Any]) -> Item:
        now = utcnow()
        doc = {**data, "created_at": now, "updated_at": now}
        result = db[ITEMS].insert_one(doc)
        doc["_id"] = result.inserted_id
        return Item.from_document(doc)

    def update(self, db: Database, item_id: str, data: dict[str, Any]) -> Item | None:
        """Overwrite the given fields; None if the item does not exist."""
        oid = parse_object_id(item_id)
        if oid is None:
            return None
        doc = db[ITEMS].find_one_and_update(
            {"_id": oid},
            {"$set": {**data, "updated_at": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        return Item.from_document(doc) if doc else None

    def delete(self, db: Database, item_id: str) -> Item | None:
        """Delete and return the last known content, or None."""
        oid = parse_object_id(item_id)
        if oid is None:
            return None
        doc = db[ITEMS].find_one_and_delete({"_id": oid})
        return Item.from_document(doc) if doc else None
