from __future__ import annotations

import logging
from uuid import uuid4

from fastapi import Request

from scheduling_api.core.logging import correlation_id_var, tenant_id_var
from scheduling_api.core.security import identity_from_authorization

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


# PUBLIC_INTERFACE
async def request_context_middleware(request: Request, call_next):
    """
    Attach the caller's identity and a correlation id to the request.

    tenant_id and role come from the bearer token and are left as None when it is
    absent or invalid; routes that need them answer 401. The correlation id is taken
    from X-Correlation-ID or X-Request-ID (a UUID otherwise) and echoed back.
    """
    correlation_id = (
        request.headers.get(CORRELATION_HEADER)
        or request.headers.get("X-Request-ID")
        or str(uuid4())
    )
    tenant_id, role = identity_from_authorization(request.headers.get("Authorization")) or (None, None)

    request.state.correlation_id = correlation_id
    request.state.tenant_id = tenant_id
    request.state.role = role

    cid_token = correlation_id_var.set(correlation_id)
    tenant_token = tenant_id_var.set(tenant_id)
    try:
        logger.info("%s %s", request.method, request.url.path)
        response = await call_next(request)
    finally:
        tenant_id_var.reset(tenant_token)
        correlation_id_var.reset(cid_token)

    response.headers[CORRELATION_HEADER] = correlation_id
    return response
