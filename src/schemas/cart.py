"""Cart schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CartItemAdd(BaseModel):
    """Add a product to the cart."""

    model_config = ConfigDict(coerce_numbers_to_str=True, str_strip_whitespace=True)

    product_id: str = Field(..., min_length=1, max_length=64)
    quantity: int = Field(1, ge=1, le=99)
    name: str | None = Field(None, max_length=255)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    image_url: str | None = Field(None, max_length=255)


class CartItemResponse(BaseModel):
    """Cart line response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: str
    product_name: str | None
    unit_price: float | None
    image_url: str | None
    quantity: int
    created_at: datetime
    updated_at: datetime
