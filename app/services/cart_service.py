# app/services/cart_service.py
import logging

from bson import ObjectId
from fastapi import HTTPException, status
from pymongo.database import Database

from app.models.base import parse_object_id
from app.models.cart import Cart
from app.repositories.cart_repo import CartRepository
from app.repositories.item_repo import ItemRepository
from app.schemas.cart import CartItemCreate, CartRead

logger = logging.getLogger(__name__)


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - validate product existence
      - snapshot name/image/price from the item when a line is added
      - keep at most one line per product (adding twice is a no-op)
    """

    def __init__(self, cart_repo: CartRepository, item_repo: ItemRepository):
        self.cart_repo = cart_repo
        self.item_repo = item_repo

    def get_cart(self, db: Database, user_id: str) -> Cart | CartRead:
        """
        Return the user's cart, or an empty one.
        Reading never creates a cart document.
        """
        cart = self.cart_repo.get_for_user(db, ObjectId(user_id))
        if cart is None:
            return CartRead(items=[])
        return cart

    def add_to_cart(self, db: Database, user_id: str, payload: CartItemCreate) -> Cart:
        """
        Add a product to the user's cart.

        Rules:
          - product must exist (404 otherwise)
          - cart is created on first add
          - a product already in the cart is left as is
        """
        item = self.item_repo.get_by_id(db, payload.product_id)
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )

        line = {
            "product": ObjectId(item.id),
            "name": item.title,
            "image": item.image,
            "price": item.price,
        }
        cart = self.cart_repo.add_line(db, ObjectId(user_id), line)
        logger.debug("User %s added product %s to cart", user_id, item.id)
        return cart

    def remove_item(self, db: Database, user_id: str, product_id: str) -> Cart:
        """
        Remove a product from the cart (if present).

        Raises:
            HTTPException(404): if the user has no cart at all.
        """
        # malformed ids cannot match any line; pulling them is a no-op
        product_key = parse_object_id(product_id) or product_id
        cart = self.cart_repo.remove_line(db, ObjectId(user_id), product_key)
        if cart is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cart not found",
            )
        return cart

    def clear_cart(self, db: Database, user_id: str) -> None:
        """Delete the whole cart document. Idempotent."""
        if self.cart_repo.delete_for_user(db, ObjectId(user_id)):
            logger.debug("Cleared cart of user %s", user_id)
