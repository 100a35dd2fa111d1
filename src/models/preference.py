"""User preference model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import backref, relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Preference(Base, TimestampMixin):
    """Favorite team or country shown on the user's home screen."""

    __tablename__ = "preferences"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    team_id = Column(String(64), nullable=True)  # Id in the source provider, if any
    team_name = Column(String(100), nullable=False)
    team_logo = Column(String(255), nullable=False)

    # Relationships
    user = relationship(
        "User",
        backref=backref(
            "preference", uselist=False, cascade="all, delete-orphan", passive_deletes=True
        ),
    )
