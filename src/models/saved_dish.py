"""Saved dish model."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import backref, relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class SavedDish(Base, TimestampMixin):
    """A typical dish from a country that the user bookmarked."""

    __tablename__ = "saved_dishes"
    __table_args__ = (
        UniqueConstraint("user_id", "country", "dish", name="uq_saved_dish_user_country_dish"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    country = Column(String(100), nullable=False)
    dish = Column(String(255), nullable=False)
    image_url = Column(String(500), nullable=True)

    # Relationships
    user = relationship(
        "User", backref=backref("saved_dishes", cascade="all, delete-orphan", passive_deletes=True)
    )
