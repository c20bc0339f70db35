# app/models/user.py
from datetime import datetime

from app.models.base import MongoDocument

USERS = "users"


class User(MongoDocument):
    """
    Registered account.

    Collection: "users"

    Identity:
      - id: ObjectId assigned on insert; also the JWT "sub" claim.
      - email: unique (enforced by index), matched exactly.

    The password is stored as a salted PBKDF2 hash; neither
    `password_hash` nor `salt` ever leaves the service layer.
    Users are never updated or deleted by the API.
    """

    name: str
    email: str
    password_hash: str
    salt: str
    created_at: datetime
    updated_at: datetime
