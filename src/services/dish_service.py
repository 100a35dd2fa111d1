"""Dish lookup by cuisine area through TheMealDB."""

import logging

import httpx

from src.config import get_settings
from src.exceptions import UpstreamUnavailableError
from src.schemas.catalog import DishResponse

logger = logging.getLogger(__name__)


class DishService:
    """Lists typical dishes for an area, e.g. "Mexican"."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = get_settings()
        self.base_url = self.settings.dishes_api_url.rstrip("/")
        self.timeout = self.settings.upstream_timeout_seconds
        self.transport = transport

    async def list_dishes(self, area: str) -> list[DishResponse]:
        """List dishes for an area. Unknown areas give an empty list."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(f"{self.base_url}/filter.php", params={"a": area})
                response.raise_for_status()
                meals = response.json().get("meals") or []
            return [
                DishResponse(
                    id=str(meal["idMeal"]), name=meal["strMeal"], image=meal.get("strMealThumb")
                )
                for meal in meals
            ]
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Dish upstream failed for area {area!r}: {e}")
            raise UpstreamUnavailableError("Dish data") from e
