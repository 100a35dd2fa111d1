"""Catalog and reference data schemas."""

from pydantic import BaseModel


class ProductResponse(BaseModel):
    """A product as shown in the store, whatever its source."""

    id: str
    name: str
    description: str | None = None
    price: float
    image_url: str | None = None
    stock: int | None = None
    team: str | None = None


class ReferenceEntityResponse(BaseModel):
    """A team or country that can be chosen as favorite."""

    id: str | None = None
    name: str
    logo: str | None = None


class DishResponse(BaseModel):
    """A dish listed by the recipe provider."""

    id: str
    name: str
    image: str | None = None
