# app/repositories/user_repo.py
from typing import Any

from pymongo.database import Database

from app.models.base import parse_object_id, utcnow
from app.models.user import USERS, User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    def get_by_id(self, db: Database, user_id: str) -> User | None:
        """Return a User by _id, or None if not found or malformed."""
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        doc = db[USERS].find_one({"_id": oid})
        return User.from_document(doc) if doc else None

    def get_by_email(self, db: Database, email: str) -> User | None:
        """Return a User by unique email, or None if not found."""
        doc = db[USERS].find_one({"email": email})
        return User.from_document(doc) if doc else None

    def create(self, db: Database, data: dict[str, Any]) -> User:
        """
        Insert a new user document and return it.

        Raises:
            pymongo.errors.DuplicateKeyError: if the email is taken.
        """
        now = utcnow()
        doc = {**data, "created_at": now, "updated_at": now}
        result = db[USERS].insert_one(doc)
        doc["_id"] = result.inserted_id
        return User.from_document(doc)
