"""Google ID token verification."""

import logging

import httpx

from src.config import get_settings
from src.services.auth import FederatedIdentity

logger = logging.getLogger(__name__)


class GoogleIdentityVerifier:
    """Verify Google ID tokens through the tokeninfo endpoint."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = get_settings()
        self.tokeninfo_url = self.settings.google_tokeninfo_url
        self.client_id = self.settings.google_client_id
        self.timeout = self.settings.upstream_timeout_seconds
        self.transport = transport

    async def verify(self, id_token: str) -> FederatedIdentity | None:
        """Return the identity inside ``id_token``, or None if it is not acceptable."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.tokeninfo_url, params={"id_token": id_token})
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling Google tokeninfo: {e}")
            return None

        if response.status_code != 200:
            logger.info(f"Google rejected ID token with status {response.status_code}")
            return None

        try:
            claims = response.json()
        except ValueError:
            logger.warning("Google tokeninfo returned invalid JSON")
            return None

        if not claims.get("sub") or not claims.get("email"):
            return None
        if str(claims.get("email_verified", "")).lower() != "true":
            logger.info("Rejected Google ID token with unverified email")
            return None
        if self.client_id and claims.get("aud") != self.client_id:
            logger.warning("Rejected Google ID token issued for another client")
            return None

        return FederatedIdentity(
            subject=claims["sub"],
            email=claims["email"],
            name=claims.get("name"),
        )
