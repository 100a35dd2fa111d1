"""Saved dish API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_current_user, get_saved_dish_service
from src.models.user import User
from src.schemas.saved_dish import SavedDishCreate, SavedDishResponse, SavedDishSaveResponse
from src.services.saved_dish_service import SavedDishService

router = APIRouter(prefix="/api/saved-dishes", tags=["saved-dishes"])


@router.get("", response_model=list[SavedDishResponse])
def list_saved_dishes(
    current_user: Annotated[User, Depends(get_current_user)],
    saved_dishes: Annotated[SavedDishService, Depends(get_saved_dish_service)],
):
    """List the current user's saved dishes, newest first."""
    return saved_dishes.list_for_user(current_user.id)


@router.post("", response_model=SavedDishSaveResponse, status_code=status.HTTP_201_CREATED)
def save_dish(
    dish_data: SavedDishCreate,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    saved_dishes: Annotated[SavedDishService, Depends(get_saved_dish_service)],
):
    """Save a dish. Saving it again answers 200 instead of 201."""
    dish, created = saved_dishes.save(
        current_user.id, dish_data.country, dish_data.dish, image_url=dish_data.image_url
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    return SavedDishSaveResponse(
        created=created,
        message="Dish saved" if created else "Dish already saved",
        item=SavedDishResponse.model_validate(dish),
    )


@router.delete("/{dish_id}")
def delete_saved_dish(
    dish_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    saved_dishes: Annotated[SavedDishService, Depends(get_saved_dish_service)],
):
    """Remove a saved dish."""
    saved_dishes.remove(dish_id, current_user.id)
    return {"message": "Saved dish removed"}
