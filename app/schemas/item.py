# app/schemas/item.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemBase(BaseModel):
    """
    Business fields of a catalog item. All four are required.
    """

    title: str
    des: str
    price: float = Field(ge=0, allow_inf_nan=False)
    image: str

    @field_validator("title", "des")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @field_validator("image")
    @classmethod
    def image_present(cls, v: str) -> str:
        # stored as sent, only checked for content
        if not v.strip():
            raise ValueError("image cannot be empty")
        return v


class ItemCreate(ItemBase):
    """Payload for creating an item."""

    pass


class ItemUpdate(ItemBase):
    """
    Payload for updating an item.
    Full replace: every business field must be sent.
    """

    pass


class ItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    des: str
    price: float
    image: str
    created_at: datetime
    updated_at: datetime
