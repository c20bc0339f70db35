# app/models/cart.py
from datetime import datetime

from pydantic import BaseModel, Field

from app.models.base import MongoDocument, PyObjectId

CARTS = "carts"


class CartLine(BaseModel):
    """
    Snapshot of an item at the time it was added.

    Embedded in Cart.items. Later edits or deletion of the item
    do not touch the line.
    """

    product: PyObjectId
    name: str
    image: str
    price: float


class Cart(MongoDocument):
    """
    Shopping cart for a user.

    Collection: "carts"
      - user is unique (one cart per user)
      - at most one line per product
    """

    user: PyObjectId
    items: list[CartLine] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
