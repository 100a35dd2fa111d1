"""Catalog and reference data endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import (
    get_catalog_service,
    get_current_user,
    get_dish_service,
    get_reference_service,
)
from src.models.user import User
from src.schemas.catalog import DishResponse, ProductResponse, ReferenceEntityResponse
from src.services.catalog_service import CatalogService
from src.services.dish_service import DishService
from src.services.reference_service import ReferenceService

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    current_user: Annotated[User, Depends(get_current_user)],
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """List store products. Never empty; falls back to fixed data upstream."""
    return await catalog.list_products()


@router.get("/reference-entities", response_model=list[ReferenceEntityResponse])
async def list_reference_entities(
    current_user: Annotated[User, Depends(get_current_user)],
    reference: Annotated[ReferenceService, Depends(get_reference_service)],
):
    """List teams or countries that can be picked as favorite."""
    return await reference.list_entities()


@router.get("/dishes", response_model=list[DishResponse])
async def list_dishes(
    area: Annotated[str, Query(min_length=1, max_length=100)],
    current_user: Annotated[User, Depends(get_current_user)],
    dishes: Annotated[DishService, Depends(get_dish_service)],
):
    """List typical dishes for a cuisine area."""
    return await dishes.list_dishes(area)
