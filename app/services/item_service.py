# app/services/item_service.py
from fastapi import HTTPException, status
from pymongo.database import Database

from app.models.item import Item
from app.repositories.item_repo import ItemRepository
from app.schemas.item import ItemCreate, ItemUpdate


class ItemService:
    """
    Business logic for catalog items.

    Any authenticated caller may create, update or delete
    (enforced at router via require_auth); there are no roles.
    """

    def __init__(self, repo: ItemRepository):
        self.repo = repo

    @staticmethod
    def _not_found() -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found",
        )

    def list_items(self, db: Database) -> list[Item]:
        return self.repo.list(db)

    def get_item(self, db: Database, item_id: str) -> Item:
        item = self.repo.get_by_id(db, item_id)
        if not item:
            raise self._not_found()
        return item

    def create_item(self, db: Database, payload: ItemCreate) -> Item:
        return self.repo.create(db, payload.model_dump())

    def update_item(self, db: Database, item_id: str, payload: ItemUpdate) -> Item:
        """Full replace of title, des, price and image."""
        item = self.repo.update(db, item_id, payload.model_dump())
        if not item:
            raise self._not_found()
        return item

    def delete_item(self, db: Database, item_id: str) -> Item:
        """Delete and return the item as it was before deletion."""
        item = self.repo.delete(db, item_id)
        if not item:
            raise self._not_found()
        return item
