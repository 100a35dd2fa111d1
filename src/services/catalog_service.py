"""Product catalog service.

Products come either from the local ``products`` table or from the fake
store API, depending on ``settings.catalog_source``. Either source falls
back to a fixed jersey list so the store is never empty.
"""

import logging
import string
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import httpx
from sqlalchemy.orm import Session, joinedload

from src.config import get_settings
from src.models.product import Product
from src.schemas.catalog import ProductResponse
from src.services.fallback_data import FALLBACK_PRODUCTS

logger = logging.getLogger(__name__)

TITLE_WORDS_IN_NAME = 4


class CatalogService:
    """Service for listing store products."""

    def __init__(self, db: Session, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.db = db
        self.settings = get_settings()
        self.source = self.settings.catalog_source
        self.base_url = self.settings.catalog_api_url.rstrip("/")
        self.max_items = self.settings.catalog_max_items
        self.timeout = self.settings.upstream_timeout_seconds
        self.transport = transport

    async def list_products(self) -> list[ProductResponse]:
        """List the products in the configured catalog."""
        if self.source == "local":
            products = self.list_local_products()
            if not products:
                logger.warning("Local catalog is empty, serving fallback products")
                return self.fallback_products()
            return products

        try:
            products = await self._fetch_remote_products()
        except (httpx.HTTPError, ArithmeticError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Catalog upstream failed, serving fallback products: {e}")
            return self.fallback_products()

        if not products:
            logger.warning("Catalog upstream returned no products, serving fallback products")
            return self.fallback_products()
        return products

    def list_local_products(self) -> list[ProductResponse]:
        """List products stored in the database."""
        rows = self.db.query(Product).options(joinedload(Product.team)).order_by(Product.id).all()
        return [
            ProductResponse(
                id=str(row.id),
                name=row.name,
                description=row.description,
                price=float(row.price),
                image_url=row.image_url,
                stock=row.stock,
                team=row.team.name if row.team else None,
            )
            for row in rows[: self.max_items]
        ]

    @staticmethod
    def fallback_products() -> list[ProductResponse]:
        """The fixed product list used when the upstream is down."""
        return [ProductResponse(**product) for product in FALLBACK_PRODUCTS]

    async def _fetch_remote_products(self) -> list[ProductResponse]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(f"{self.base_url}/products")
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, list):
            raise ValueError("Expected a JSON array of products")
        return [self._shape_product(item) for item in data[: self.max_items]]

    @staticmethod
    def _shape_product(item: dict[str, Any]) -> ProductResponse:
        """Translate one fake store product into the store's shape."""
        title = str(item.get("title") or "").strip()
        category = str(item.get("category") or "").strip()
        fragment = " ".join(title.split()[:TITLE_WORDS_IN_NAME])
        name = f"{string.capwords(category)}: {fragment}" if category else fragment
        price = Decimal(str(item["price"])).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return ProductResponse(
            id=str(item["id"]),
            name=name or f"Product {item['id']}",
            description=item.get("description"),
            price=float(price),
            image_url=item.get("image"),
        )
