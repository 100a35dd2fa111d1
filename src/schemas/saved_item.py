"""Saved item (wishlist) schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class SavedItemCreate(BaseModel):
    """Save a jersey to the wishlist."""

    model_config = ConfigDict(coerce_numbers_to_str=True, str_strip_whitespace=True)

    product_id: str = Field(..., min_length=1, max_length=64)
    name: str | None = Field(None, max_length=255)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    image_url: str | None = Field(None, max_length=255)


class SavedItemResponse(BaseModel):
    """Saved item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: str
    product_name: str | None
    price: float | None
    image_url: str | None
    created_at: datetime


class SavedItemSaveResponse(BaseModel):
    """Result of a save; ``created`` is False when the item was already saved."""

    created: bool
    message: str
    item: SavedItemResponse
