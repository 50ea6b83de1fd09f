from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.db.session import get_async_session
from scheduling_api.repositories.clients import ClientRepository
from scheduling_api.services.clients import ClientService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Authenticated identity for a single request, passed explicitly to handlers."""

    tenant_id: str
    role: str


# PUBLIC_INTERFACE
async def get_request_context(request: Request) -> RequestContext:
    """
    Read the tenant id and role placed on request.state by the authentication middleware.

    Raises:
        HTTPException: 401 Unauthorized if either value is missing.
    Returns:
        RequestContext: identity for the current request
    """
    tenant_id = getattr(request.state, "tenant_id", None)
    role = getattr(request.state, "role", None)
    if not tenant_id or not role:
        logger.warning("Missing authentication context for %s %s", request.method, request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication context",
        )
    return RequestContext(tenant_id=tenant_id, role=role)


# PUBLIC_INTERFACE
async def get_client_service(
    session: AsyncSession = Depends(get_async_session),
) -> ClientService:
    """Build a ClientService bound to a fresh ClientRepository for this request."""
    return ClientService(ClientRepository(session))
