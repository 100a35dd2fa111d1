"""Favorite-selectable teams and countries."""

import logging

import httpx
from sqlalchemy.orm import Session

from src.config import get_settings
from src.exceptions import UpstreamUnavailableError
from src.models.team import Team
from src.schemas.catalog import ReferenceEntityResponse

logger = logging.getLogger(__name__)


class ReferenceService:
    """Lists the teams (local) or countries (REST Countries) users can pick."""

    def __init__(self, db: Session, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.db = db
        self.settings = get_settings()
        self.source = self.settings.reference_source
        self.base_url = self.settings.reference_api_url.rstrip("/")
        self.timeout = self.settings.upstream_timeout_seconds
        self.transport = transport

    async def list_entities(self) -> list[ReferenceEntityResponse]:
        """List reference entities from the configured source."""
        if self.source == "local":
            teams = self.db.query(Team).order_by(Team.name).all()
            return [
                ReferenceEntityResponse(id=str(team.id), name=team.name, logo=team.logo_url)
                for team in teams
            ]

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    f"{self.base_url}/all", params={"fields": "name,flags,cca3"}
                )
                response.raise_for_status()
                countries = response.json()
            entities = [
                ReferenceEntityResponse(
                    id=country.get("cca3"),
                    name=country["name"]["common"],
                    logo=(country.get("flags") or {}).get("png"),
                )
                for country in countries
            ]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Country upstream failed: {e}")
            raise UpstreamUnavailableError("Country data") from e

        return sorted(entities, key=lambda entity: entity.name)
