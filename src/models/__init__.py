"""SQLAlchemy models."""

from src.models.cart import CartItem
from src.models.preference import Preference
from src.models.product import Product
from src.models.saved_dish import SavedDish
from src.models.saved_item import SavedItem
from src.models.team import Team
from src.models.user import User

__all__ = [
    "User",
    "Team",
    "Product",
    "CartItem",
    "SavedItem",
    "Preference",
    "SavedDish",
]
