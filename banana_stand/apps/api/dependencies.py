"""Shared FastAPI dependencies for token validation and service access."""

import hmac
from typing import Annotated, Optional

from fastapi import Header, HTTPException, Request, status

from banana_stand.core.config import config
from banana_stand.services import ServiceContainer


def _extract_token(authorization: Optional[str], x_admin_token: Optional[str]) -> Optional[str]:
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip()
    if x_admin_token:
        return x_admin_token.strip()
    return None


async def require_healthcheck_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
    x_admin_token: Annotated[Optional[str], Header(alias="X-Admin-Token")] = None,
) -> None:
    """Token guard for the health check endpoint (bearer or X-Admin-Token)."""
    if not config.ENABLE_HEALTHCHECK_AUTH:
        return
    expected = config.HEALTHCHECK_API_TOKEN
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token not configured",
            headers={"WWW-Authenticate": "Bearer"},
        )
    provided = _extract_token(authorization, x_admin_token)
    if not provided:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not hmac.compare_digest(provided, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_service_container(request: Request) -> ServiceContainer:
    """Resolve the service container configured on the application."""
    services = getattr(request.app.state, "services", None)
    if not isinstance(services, ServiceContainer):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        )
    return services


__all__ = ["require_healthcheck_token", "get_service_container"]
