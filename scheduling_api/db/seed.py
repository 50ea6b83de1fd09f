"""
Database seeding utilities for demo data.

Seeds a handful of clients for the configured DEFAULT_TENANT_ID when that tenant
has none yet, so a fresh environment has something to list.

Usage:
  python -m scheduling_api.db.run_migrations
  python -m scheduling_api.db.seed
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_api.core.settings import get_app_settings
from scheduling_api.db.session import get_async_session
from scheduling_api.repositories.clients import ClientRepository

logger = logging.getLogger(__name__)

DEMO_CLIENTS = (
    {"name": "Ana Souza", "phone": "+55 11 91234-5678", "email": "ana@example.com", "birth_date": date(1990, 5, 5), "gender": "female"},
    {"name": "Bruno Lima", "phone": "+55 11 99876-5432", "notes": "Prefers morning appointments"},
    {"name": "Carla Mendes", "email": "carla@example.com"},
)


# PUBLIC_INTERFACE
async def seed_clients(session: AsyncSession, tenant_id: str) -> int:
    """
    Insert demo clients for `tenant_id` unless the tenant already has clients.

    Returns:
        Number of clients inserted (0 when the tenant was already populated).
    """
    repo = ClientRepository(session)
    if await repo.count_clients(tenant_id):
        logger.info("Tenant already has clients; skipping seed")
        return 0
    for values in DEMO_CLIENTS:
        await repo.create_client(tenant_id, **values)
    return len(DEMO_CLIENTS)


# PUBLIC_INTERFACE
async def seed_all() -> None:
    """Seed demo data for the default tenant using the global engine."""
    tenant_id = get_app_settings().DEFAULT_TENANT_ID
    async for session in get_async_session():
        inserted = await seed_clients(session, tenant_id)
        logger.info("Seeded %d clients for tenant %s", inserted, tenant_id)


if __name__ == "__main__":
    asyncio.run(seed_all())
