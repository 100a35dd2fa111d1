"""Shared plumbing for resources owned by a single user."""

from typing import Any

from sqlalchemy.orm import Session

from src.exceptions import NotFoundError


class UserResourceService:
    """Base service for tables keyed by ``user_id``.

    Every query filters on the caller's user id so one user can never read
    or delete another user's rows, even by guessing ids.
    """

    model: Any = None
    entity_name = "Resource"

    def __init__(self, db: Session):
        self.db = db

    def _ordering(self) -> list[Any]:
        return [self.model.id]

    def list_for_user(self, user_id: int) -> list[Any]:
        """Return all rows owned by the user."""
        return (
            self.db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(*self._ordering())
            .all()
        )

    def get_owned(self, resource_id: int, user_id: int) -> Any:
        """Return the row if it exists and belongs to the user, else raise 404."""
        row = (
            self.db.query(self.model)
            .filter(self.model.id == resource_id, self.model.user_id == user_id)
            .first()
        )
        if row is None:
            raise NotFoundError(self.entity_name, resource_id, user_id=user_id)
        return row

    def remove(self, resource_id: int, user_id: int) -> None:
        """Delete a row owned by the user."""
        row = self.get_owned(resource_id, user_id)
        self.db.delete(row)
        self.db.commit()

    def _execute_upsert(self, stmt: Any) -> Any | None:
        """Run an INSERT ... ON CONFLICT ... RETURNING and commit.

        Returns the affected row, or None when the conflict clause skipped it.
        """
        row = self.db.scalars(
            stmt.returning(self.model), execution_options={"populate_existing": True}
        ).first()
        self.db.commit()
        return row
