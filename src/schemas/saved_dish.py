"""Saved dish schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SavedDishCreate(BaseModel):
    """Bookmark a dish from a country."""

    model_config = ConfigDict(str_strip_whitespace=True)

    country: str = Field(..., min_length=1, max_length=100)
    dish: str = Field(..., min_length=1, max_length=255)
    image_url: str | None = Field(None, max_length=500)


class SavedDishResponse(BaseModel):
    """Saved dish response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    country: str
    dish: str
    image_url: str | None
    created_at: datetime


class SavedDishSaveResponse(BaseModel):
    """Result of a save; ``created`` is False when the dish was already saved."""

    created: bool
    message: str
    item: SavedDishResponse
