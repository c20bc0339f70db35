# app/repositories/cart_repo.py
from typing import Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.models.base import utcnow
from app.models.cart import CARTS, Cart


class CartRepository:
    """
    Data access layer for Cart.

    Every mutation is a single atomic update on the cart document
    ($setOnInsert / $push / $pull), so concurrent requests for the
    same user cannot overwrite each other's lines.
    """

    ADD_ATTEMPTS = 3

    def get_for_user(self, db: Database, user_id: ObjectId) -> Cart | None:
        doc = db[CARTS].find_one({"user": user_id})
        return Cart.from_document(doc) if doc else None

    def ensure_cart(self, db: Database, user_id: ObjectId) -> None:
        """Create an empty cart for the user unless one exists."""
        now = utcnow()
        try:
            db[CARTS].update_one(
                {"user": user_id},
                {
                    "$setOnInsert": {
                        "items": [],
                        "created_at": now,
                        "updated_at": now,
                    }
                },
                upsert=True,
            )
        except DuplicateKeyError:
            # A concurrent upsert won the race; the cart exists now.
            pass

    def add_line(self, db: Database, user_id: ObjectId, line: dict[str, Any]) -> Cart:
        """
        Append `line` unless a line for the same product is present.

        Creates the cart on first use, and again if a concurrent clear
        removes it before the push. Returns the cart after the update
        either way.
        """
        self.ensure_cart(db, user_id)
        for _ in range(self.ADD_ATTEMPTS):
            doc = db[CARTS].find_one_and_update(
                {"user": user_id, "items.product": {"$ne": line["product"]}},
                {"$push": {"items": line}, "$set": {"updated_at": utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
            if doc is None:
                # product already in cart
                doc = db[CARTS].find_one({"user": user_id})
            if doc is not None:
                return Cart.from_document(doc)
            # cart was cleared between the upsert and the push
            self.ensure_cart(db, user_id)
        raise RuntimeError(f"cart of user {user_id} kept disappearing during add")

    def remove_line(
        self, db: Database, user_id: ObjectId, product_id: Any
    ) -> Cart | None:
        """
        Pull every line for `product_id`. None if the user has no cart.

        An emptied cart is kept as a document with no lines.
        """
        doc = db[CARTS].find_one_and_update(
            {"user": user_id},
            {"$pull": {"items": {"product": product_id}}, "$set": {"updated_at": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        return Cart.from_document(doc) if doc else None

    def delete_for_user(self, db: Database, user_id: ObjectId) -> bool:
        result = db[CARTS].delete_one({"user": user_id})
        return result.deleted_count > 0
