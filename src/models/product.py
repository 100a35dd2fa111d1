"""Product model for the local store catalog."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from src.database import Base


class Product(Base):
    """A jersey in the local catalog."""

    __tablename__ = "products"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_products_price_non_negative"),)

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String(255), nullable=True)
    stock = Column(Integer, nullable=True, default=10)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=True)

    # Relationships
    team = relationship("Team", backref="products")
