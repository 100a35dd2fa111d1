"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, FederatedLogin, UserLogin, UserRegister, UserResponse
from src.schemas.cart import CartItemAdd, CartItemResponse
from src.schemas.catalog import DishResponse, ProductResponse, ReferenceEntityResponse
from src.schemas.preference import PreferenceResponse, PreferenceSet
from src.schemas.saved_dish import SavedDishCreate, SavedDishResponse, SavedDishSaveResponse
from src.schemas.saved_item import SavedItemCreate, SavedItemResponse, SavedItemSaveResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "FederatedLogin",
    "AuthResponse",
    "UserResponse",
    "CartItemAdd",
    "CartItemResponse",
    "SavedItemCreate",
    "SavedItemResponse",
    "SavedItemSaveResponse",
    "PreferenceSet",
    "PreferenceResponse",
    "SavedDishCreate",
    "SavedDishResponse",
    "SavedDishSaveResponse",
    "ProductResponse",
    "ReferenceEntityResponse",
    "DishResponse",
]
