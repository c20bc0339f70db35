# app/routers/cart.py
from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.core.auth import require_auth
from app.database import get_db
from app.repositories.cart_repo import CartRepository
from app.repositories.item_repo import ItemRepository
from app.schemas.cart import CartItemCreate, CartRead, MessageResponse
from app.schemas.user import AuthUser
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
item_repo = ItemRepository()
service = CartService(cart_repo, item_repo)


@router.get("", response_model=CartRead, response_model_exclude_none=True)
def get_my_cart(
    db: Database = Depends(get_db),
    current_user: AuthUser = Depends(require_auth),
):
    """
    Get current user's cart.

    Users that never added anything get `{"items": []}`.
    """
    return service.get_cart(db, current_user.id)


@router.post(
    "",
    response_model=CartRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def add_to_cart(
    payload: CartItemCreate,
    db: Database = Depends(get_db),
    current_user: AuthUser = Depends(require_auth),
):
    """
    Add product to the current user's cart.

    Returns the full cart, also when the product was already in it.
    """
    return service.add_to_cart(db, current_user.id, payload)


@router.delete("/{product_id}", response_model=CartRead, response_model_exclude_none=True)
def remove_cart_item(
    product_id: str,
    db: Database = Depends(get_db),
    current_user: AuthUser = Depends(require_auth),
):
    """
    Remove a product from the cart.

    Returns the updated cart.
    """
    return service.remove_item(db, current_user.id, product_id)


@router.delete("", response_model=MessageResponse)
def clear_cart(
    db: Database = Depends(get_db),
    current_user: AuthUser = Depends(require_auth),
):
    """
    Delete the entire cart.
    """
    service.clear_cart(db, current_user.id)
    return MessageResponse(message="Cart cleared")
