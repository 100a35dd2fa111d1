"""Cart model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import backref, relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class CartItem(Base, TimestampMixin):
    """One product line in a user's cart.

    Product details are snapshotted on first add since remote products
    cannot be looked up by id later.
    """

    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_user_product"),
        CheckConstraint("quantity >= 1", name="ck_cart_quantity_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id = Column(String(64), nullable=False)
    product_name = Column(String(255), nullable=True)
    unit_price = Column(Numeric(10, 2), nullable=True)
    image_url = Column(String(255), nullable=True)
    quantity = Column(Integer, nullable=False, default=1)

    # Relationships
    user = relationship(
        "User", backref=backref("cart_items", cascade="all, delete-orphan", passive_deletes=True)
    )
