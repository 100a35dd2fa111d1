"""Saved item (wishlist) service."""

from decimal import Decimal

from src.models.saved_item import SavedItem
from src.services.upsert import upsert_insert
from src.services.user_resources import UserResourceService


class SavedItemService(UserResourceService):
    """Wishlist entries, one per (user, product)."""

    model = SavedItem
    entity_name = "Saved item"

    def save(
        self,
        user_id: int,
        product_id: str,
        product_name: str | None = None,
        price: Decimal | None = None,
        image_url: str | None = None,
    ) -> tuple[SavedItem, bool]:
        """Save a product for the user.

        Returns the row and whether it was created by this call. Saving an
        already saved product leaves the existing row untouched.
        """
        stmt = (
            upsert_insert(self.db, SavedItem)
            .values(
                user_id=user_id,
                product_id=product_id,
                product_name=product_name,
                price=price,
                image_url=image_url,
            )
            .on_conflict_do_nothing(index_elements=["user_id", "product_id"])
        )
        item = self._execute_upsert(stmt)
        if item is not None:
            return item, True

        existing = (
            self.db.query(SavedItem)
            .filter(SavedItem.user_id == user_id, SavedItem.product_id == product_id)
            .one()
        )
        return existing, False
