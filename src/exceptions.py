"""HTTP exceptions shared by services and routers.

Services raise these directly; FastAPI renders them as ``{"detail": ...}``
with the matching status code, so driver errors never reach the client.

Usage:
    from src.exceptions import NotFoundError

    raise NotFoundError("Saved item", item_id)
"""

import logging
from typing import Any

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class AppException(HTTPException):
    """Base exception that logs itself on construction."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        log_level: int = logging.WARNING,
        headers: dict[str, str] | None = None,
        **log_context: Any,
    ):
        context = " ".join(f"{key}={value}" for key, value in log_context.items())
        logger.log(log_level, f"{status_code} {detail} {context}".rstrip())
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class InvalidInputError(AppException):
    """Missing or malformed request fields (400)."""

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail, log_level=logging.INFO, **log_context)


class UnauthenticatedError(AppException):
    """No usable credentials were presented (401)."""

    def __init__(self, detail: str = "Authentication token required", **log_context: Any):
        super().__init__(
            status.HTTP_401_UNAUTHORIZED,
            detail,
            log_level=logging.INFO,
            headers={"WWW-Authenticate": "Bearer"},
            **log_context,
        )


class InvalidTokenError(AppException):
    """Token is malformed, expired or signed with another key (403)."""

    def __init__(self, detail: str = "Invalid or expired token", **log_context: Any):
        super().__init__(status.HTTP_403_FORBIDDEN, detail, **log_context)


class ConflictError(AppException):
    """Uniqueness violation that the caller must resolve (409)."""

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(status.HTTP_409_CONFLICT, detail, **log_context)


class NotFoundError(AppException):
    """Entity absent or not owned by the caller (404).

    Usage:
        raise NotFoundError("Cart item", 12)
    """

    def __init__(self, entity: str, entity_id: int | str | None = None, **log_context: Any):
        detail = f"{entity} not found"
        super().__init__(
            status.HTTP_404_NOT_FOUND,
            detail,
            log_level=logging.INFO,
            entity_id=entity_id,
            **log_context,
        )


class UpstreamUnavailableError(AppException):
    """An external data provider failed or timed out (503)."""

    def __init__(self, service: str, **log_context: Any):
        super().__init__(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            f"{service} is currently unavailable",
            log_level=logging.ERROR,
            service=service,
            **log_context,
        )
