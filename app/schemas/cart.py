# app/schemas/cart.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CartItemCreate(BaseModel):
    """
    Payload for adding to cart.

    Accepts `productId` (as sent by existing clients) or `product_id`.
    """

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")

    @field_validator("product_id")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("productId cannot be empty")
        return v


class CartLineRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product: str
    name: str
    image: str
    price: float


class CartRead(BaseModel):
    """
    Cart response.

    A user without a cart gets `{"items": []}`; the other fields are
    omitted (routes use response_model_exclude_none).
    """

    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    user: str | None = None
    items: list[CartLineRead] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MessageResponse(BaseModel):
    message: str
