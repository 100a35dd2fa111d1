"""Cart API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_cart_service, get_current_user
from src.models.user import User
from src.schemas.cart import CartItemAdd, CartItemResponse
from src.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("", response_model=list[CartItemResponse])
def get_cart(
    current_user: Annotated[User, Depends(get_current_user)],
    cart: Annotated[CartService, Depends(get_cart_service)],
):
    """Get the current user's cart."""
    return cart.list_for_user(current_user.id)


@router.post("/add", response_model=CartItemResponse, status_code=status.HTTP_201_CREATED)
def add_to_cart(
    item_data: CartItemAdd,
    current_user: Annotated[User, Depends(get_current_user)],
    cart: Annotated[CartService, Depends(get_cart_service)],
):
    """Add a product to the cart. Adding it again increases the quantity."""
    return cart.add_item(
        current_user.id,
        item_data.product_id,
        quantity=item_data.quantity,
        product_name=item_data.name,
        unit_price=item_data.price,
        image_url=item_data.image_url,
    )


@router.delete("/{item_id}")
def remove_from_cart(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    cart: Annotated[CartService, Depends(get_cart_service)],
):
    """Remove a line from the cart."""
    cart.remove(item_id, current_user.id)
    return {"message": "Item removed from cart"}
