"""Favorite team/country preference service."""

from sqlalchemy import func

from src.models.preference import Preference
from src.services.upsert import upsert_insert
from src.services.user_resources import UserResourceService


class PreferenceService(UserResourceService):
    """Single-valued favorite per user."""

    model = Preference
    entity_name = "Preference"

    def get(self, user_id: int) -> Preference | None:
        """Get the user's preference, if one has been set."""
        return self.db.query(Preference).filter(Preference.user_id == user_id).first()

    def set(
        self, user_id: int, team_name: str, team_logo: str, team_id: str | None = None
    ) -> Preference:
        """Set the favorite, overwriting any previous one."""
        stmt = upsert_insert(self.db, Preference).values(
            user_id=user_id, team_id=team_id, team_name=team_name, team_logo=team_logo
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_={
                "team_id": stmt.excluded.team_id,
                "team_name": stmt.excluded.team_name,
                "team_logo": stmt.excluded.team_logo,
                "updated_at": func.now(),
            },
        )
        return self._execute_upsert(stmt)
