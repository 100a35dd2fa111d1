"""Shopping cart service."""

import logging
from decimal import Decimal

from sqlalchemy import func

from src.models.cart import CartItem
from src.services.upsert import upsert_insert
from src.services.user_resources import UserResourceService

logger = logging.getLogger(__name__)


class CartService(UserResourceService):
    """Cart lines, one per (user, product)."""

    model = CartItem
    entity_name = "Cart item"

    def add_item(
        self,
        user_id: int,
        product_id: str,
        quantity: int = 1,
        product_name: str | None = None,
        unit_price: Decimal | None = None,
        image_url: str | None = None,
    ) -> CartItem:
        """Add ``quantity`` of a product, incrementing an existing line.

        The snapshot fields are only written when the line is created.
        """
        stmt = upsert_insert(self.db, CartItem).values(
            user_id=user_id,
            product_id=product_id,
            product_name=product_name,
            unit_price=unit_price,
            image_url=image_url,
            quantity=quantity,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "product_id"],
            set_={
                "quantity": CartItem.quantity + stmt.excluded.quantity,
                "updated_at": func.now(),
            },
        )
        item = self._execute_upsert(stmt)
        logger.info(f"User {user_id} cart: product {product_id} now x{item.quantity}")
        return item
