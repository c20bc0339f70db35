# app/models/item.py
from datetime import datetime

from app.models.base import MongoDocument

ITEMS = "items"


class Item(MongoDocument):
    """
    Catalog entry.

    Collection: "items"
    Listed newest first (created_at descending).
    """

    title: str
    des: str
    price: float
    image: str
    created_at: datetime
    updated_at: datetime
