from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.db.models.client import Client
from .base import BaseRepository

# Client ids are stored as 32-bit signed integers; nothing outside this range can exist.
MAX_CLIENT_ID = 2**31 - 1


def _storable_id(client_id: int) -> bool:
    return 1 <= client_id <= MAX_CLIENT_ID


class ClientRepository(BaseRepository):
    """Repository for tenant-owned clients. The tenant id is always the first argument."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def list_clients(self, tenant_id: str) -> List[Client]:
        stmt = (
            select(Client)
            .where(Client.tenant_id == tenant_id)
            .order_by(Client.name.asc(), Client.id.asc())
        )
        return await self.fetch_all(stmt)

    async def get_client(self, tenant_id: str, client_id: int) -> Optional[Client]:
        if not _storable_id(client_id):
            return None
        stmt = select(Client).where(Client.id == client_id, Client.tenant_id == tenant_id)
        return await self.fetch_one(stmt)

    async def create_client(
        self,
        tenant_id: str,
        *,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        notes: Optional[str] = None,
        birth_date: Optional[date] = None,
        gender: Optional[str] = None,
    ) -> Optional[Client]:
        """Insert a client and return the stored row, server-assigned fields included."""
        stmt = (
            insert(Client)
            .values(
                tenant_id=tenant_id,
                name=name,
                phone=phone or None,
                email=email or None,
                notes=notes or None,
                birth_date=birth_date,
                gender=gender or None,
            )
            .returning(Client)
        )
        created = await self.fetch_one(stmt)
        await self.commit()
        return created

    async def update_client(
        self,
        tenant_id: str,
        client_id: int,
        *,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        notes: Optional[str] = None,
        birth_date: Optional[date] = None,
        gender: Optional[str] = None,
    ) -> Optional[Client]:
        """
        Replace a client's fields and return the stored row.

        Returns None (and changes nothing) when no row matches the id within the tenant.
        """
        if not _storable_id(client_id):
            return None
        stmt = (
            update(Client)
            .where(Client.id == client_id, Client.tenant_id == tenant_id)
            .values(
                name=name,
                phone=phone or None,
                email=email or None,
                notes=notes or None,
                birth_date=birth_date,
                gender=gender or None,
                updated_at=func.now(),
            )
            .returning(Client)
            .execution_options(synchronize_session="fetch")
        )
        updated = await self.fetch_one(stmt)
        await self.commit()
        return updated

    async def delete_client(self, tenant_id: str, client_id: int) -> int:
        """Delete a client within the tenant; returns the number of rows removed (0 or 1)."""
        if not _storable_id(client_id):
            return 0
        stmt = delete(Client).where(Client.id == client_id, Client.tenant_id == tenant_id)
        result = await self.execute(stmt)
        await self.commit()
        return int(result.rowcount or 0)

    async def count_clients(self, tenant_id: str) -> int:
        stmt = select(func.count(Client.id)).where(Client.tenant_id == tenant_id)
        result = await self.execute(stmt)
        return int(result.scalar_one())
