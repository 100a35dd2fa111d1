"""Saved item (wishlist) model."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import backref, relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class SavedItem(Base, TimestampMixin):
    """A jersey the user saved for later."""

    __tablename__ = "saved_items"
    __table_args__ = (UniqueConstraint("user_id", "product_id", name="uq_saved_user_product"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id = Column(String(64), nullable=False)
    product_name = Column(String(255), nullable=True)
    price = Column(Numeric(10, 2), nullable=True)
    image_url = Column(String(255), nullable=True)

    # Relationships
    user = relationship(
        "User", backref=backref("saved_items", cascade="all, delete-orphan", passive_deletes=True)
    )
