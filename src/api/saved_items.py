"""Saved item (wishlist) API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_current_user, get_saved_item_service
from src.models.user import User
from src.schemas.saved_item import SavedItemCreate, SavedItemResponse, SavedItemSaveResponse
from src.services.saved_item_service import SavedItemService

router = APIRouter(prefix="/api/saved-items", tags=["saved-items"])


@router.get("", response_model=list[SavedItemResponse])
def list_saved_items(
    current_user: Annotated[User, Depends(get_current_user)],
    saved_items: Annotated[SavedItemService, Depends(get_saved_item_service)],
):
    """List the current user's saved jerseys."""
    return saved_items.list_for_user(current_user.id)


@router.post("", response_model=SavedItemSaveResponse, status_code=status.HTTP_201_CREATED)
def save_item(
    item_data: SavedItemCreate,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    saved_items: Annotated[SavedItemService, Depends(get_saved_item_service)],
):
    """Save a jersey. Saving it again answers 200 instead of 201."""
    item, created = saved_items.save(
        current_user.id,
        item_data.product_id,
        product_name=item_data.name,
        price=item_data.price,
        image_url=item_data.image_url,
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    return SavedItemSaveResponse(
        created=created,
        message="Item saved" if created else "Item already saved",
        item=SavedItemResponse.model_validate(item),
    )


@router.delete("/{item_id}")
def delete_saved_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    saved_items: Annotated[SavedItemService, Depends(get_saved_item_service)],
):
    """Remove a saved jersey."""
    saved_items.remove(item_id, current_user.id)
    return {"message": "Saved item removed"}
