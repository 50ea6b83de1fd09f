from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from scheduling_api.core.errors import InternalError, NotFoundError, ValidationError
from scheduling_api.db.models.client import Client
from scheduling_api.repositories.clients import ClientRepository
from scheduling_api.schemas.clients import ClientCreate
from scheduling_api.services.authorization import ClientAction, authorize
from scheduling_api.services.base import BaseService

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def normalize_birth_date(value: Optional[str]) -> Optional[date]:
    """
    Reduce a caller-supplied birth date to day precision.

    Accepts YYYY-MM-DD or an ISO-8601 date-time. Aware date-times are converted to
    UTC before the time of day is dropped. Empty values stay absent.

    Raises:
        ValidationError: if the value cannot be parsed as a date.
    """
    if not value:
        return None
    raw = value.strip()
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid birth_date: {value!r}",
            details={"field": "birth_date", "value": value},
        ) from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def _prepare_values(payload: ClientCreate) -> Dict[str, Any]:
    return {
        "name": payload.name,
        "phone": payload.phone,
        "email": str(payload.email) if payload.email else None,
        "notes": payload.notes,
        "birth_date": normalize_birth_date(payload.birth_date),
        "gender": payload.gender,
    }


class ClientService(BaseService):
    """
    Domain service for clients.

    Every operation takes the caller's tenant id and role, checks the role against the
    client policy before any repository call, then delegates to the repository.
    """

    repository: ClientRepository

    def __init__(self, repository: ClientRepository) -> None:
        super().__init__(repository)

    # PUBLIC_INTERFACE
    async def list_clients(self, tenant_id: str, role: str) -> List[Client]:
        """Return the tenant's clients ordered by name."""
        authorize(role, ClientAction.LIST)
        return await self.repository.list_clients(tenant_id)

    # PUBLIC_INTERFACE
    async def get_client(self, tenant_id: str, role: str, client_id: int) -> Client:
        authorize(role, ClientAction.READ)
        client = await self.repository.get_client(tenant_id, client_id)
        if client is None:
            raise NotFoundError("Client not found", details={"client_id": client_id})
        return client

    # PUBLIC_INTERFACE
    async def create_client(self, tenant_id: str, role: str, payload: ClientCreate) -> Client:
        """
        Create a client and return the stored record.

        Parameters:
            tenant_id: Owning tenant
            role: Caller's role (owner or admin)
            payload: Validated client fields
        Returns:
            The created Client, including its store-assigned id and timestamps
        """
        authorize(role, ClientAction.CREATE)
        values = _prepare_values(payload)
        created = await self.repository.create_client(tenant_id, **values)
        if created is None:
            raise InternalError("Failed to create client in the database")
        logger.info("Created client %s", created.id)
        return created

    # PUBLIC_INTERFACE
    async def update_client(
        self, tenant_id: str, role: str, client_id: int, payload: ClientCreate
    ) -> Client:
        """
        Replace a client's fields and return the stored record.

        Raises:
            NotFoundError: if the client does not exist within the tenant.
        """
        authorize(role, ClientAction.UPDATE)
        values = _prepare_values(payload)
        updated = await self.repository.update_client(tenant_id, client_id, **values)
        if updated is None:
            raise NotFoundError("Client not found", details={"client_id": client_id})
        logger.info("Updated client %s", client_id)
        return updated

    # PUBLIC_INTERFACE
    async def delete_client(self, tenant_id: str, role: str, client_id: int) -> None:
        """
        Delete a client.

        The delete is conditional on the tenant, so a client belonging to another tenant
        is indistinguishable from a missing one.

        Raises:
            NotFoundError: if no row was removed.
        """
        authorize(role, ClientAction.DELETE)
        removed = await self.repository.delete_client(tenant_id, client_id)
        if not removed:
            raise NotFoundError("Client not found", details={"client_id": client_id})
        logger.info("Deleted client %s", client_id)
