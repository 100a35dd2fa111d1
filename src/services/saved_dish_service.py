"""Saved dish service."""

from typing import Any

from src.models.saved_dish import SavedDish
from src.services.upsert import upsert_insert
from src.services.user_resources import UserResourceService


class SavedDishService(UserResourceService):
    """Bookmarked dishes, one per (user, country, dish)."""

    model = SavedDish
    entity_name = "Saved dish"

    def _ordering(self) -> list[Any]:
        return [SavedDish.created_at.desc(), SavedDish.id.desc()]

    def save(
        self, user_id: int, country: str, dish: str, image_url: str | None = None
    ) -> tuple[SavedDish, bool]:
        """Save a dish; returns the row and whether this call created it."""
        stmt = (
            upsert_insert(self.db, SavedDish)
            .values(user_id=user_id, country=country, dish=dish, image_url=image_url)
            .on_conflict_do_nothing(index_elements=["user_id", "country", "dish"])
        )
        saved = self._execute_upsert(stmt)
        if saved is not None:
            return saved, True

        existing = (
            self.db.query(SavedDish)
            .filter(
                SavedDish.user_id == user_id,
                SavedDish.country == country,
                SavedDish.dish == dish,
            )
            .one()
        )
        return existing, False
