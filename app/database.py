# app/database.py
from fastapi import Request
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

from app.core.config import get_settings
from app.models.cart import CARTS
from app.models.item import ITEMS
from app.models.user import USERS

settings = get_settings()

# ---------------------------------------------------------
# MongoDB connection
#
# - One MongoClient per process: it is thread-safe and pools
#   connections, so handlers running in FastAPI's threadpool
#   share it.
# - The client is created by the app lifespan and stored on
#   app.state; handlers receive the Database through get_db()
#   instead of importing a module-level handle.
# ---------------------------------------------------------


def create_client() -> MongoClient:
    """Build a MongoClient from MONGO_URL. Connection is lazy."""
    return MongoClient(
        settings.MONGO_URL,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
        tz_aware=True,
    )


def ensure_indexes(db: Database) -> None:
    """
    Declare the indexes the data model relies on.

      - users.email unique   : one account per email
      - carts.user unique    : one cart per user
      - items.created_at     : newest-first listing

    Idempotent; called once on application startup. Also doubles as
    the connectivity check since it needs a live server.
    """
    db[USERS].create_index([("email", ASCENDING)], unique=True)
    db[CARTS].create_index([("user", ASCENDING)], unique=True)
    db[ITEMS].create_index([("created_at", DESCENDING)])


def get_db(request: Request) -> Database:
    """
    FastAPI dependency that returns the application Database.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(db: Database = Depends(get_db)):
            ...
    """
    return request.app.state.db
