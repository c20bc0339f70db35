# app/routers/items.py
from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.core.auth import require_auth
from app.database import get_db
from app.repositories.item_repo import ItemRepository
from app.schemas.item import ItemCreate, ItemRead, ItemUpdate
from app.services.item_service import ItemService

router = APIRouter(prefix="/items", tags=["Items"])

repo = ItemRepository()
service = ItemService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[ItemRead])
def list_items(db: Database = Depends(get_db)):
    """
    List all items, newest first.
    """
    return service.list_items(db)


@router.get("/{item_id}", response_model=ItemRead)
def get_item(item_id: str, db: Database = Depends(get_db)):
    return service.get_item(db, item_id)


# -------- Authenticated endpoints --------


@router.post(
    "",
    response_model=ItemRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_auth)],
)
def create_item(payload: ItemCreate, db: Database = Depends(get_db)):
    """
    Create a new item (any logged-in user).
    """
    return service.create_item(db, payload)


@router.put(
    "/{item_id}",
    response_model=ItemRead,
    dependencies=[Depends(require_auth)],
)
def update_item(item_id: str, payload: ItemUpdate, db: Database = Depends(get_db)):
    """
    Replace an item's title, des, price and image.
    """
    return service.update_item(db, item_id, payload)


@router.delete(
    "/{item_id}",
    response_model=ItemRead,
    dependencies=[Depends(require_auth)],
)
def delete_item(item_id: str, db: Database = Depends(get_db)):
    """
    Delete an item and return its last content.
    """
    return service.delete_item(db, item_id)
