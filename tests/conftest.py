import os

# Settings are read at import time by the app module; configure before importing it.
os.environ.setdefault("RUN_MIGRATIONS_ON_STARTUP", "false")
os.environ.setdefault("AUTO_SEED", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from scheduling_api.api.main import app
from scheduling_api.core.security import create_access_token
from scheduling_api.db import Base
from scheduling_api.db.session import get_async_session


@pytest.fixture
def db_path(tmp_path):
    """Fresh SQLite database file with the schema created."""
    path = tmp_path / "clients.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(bind=engine)
    engine.dispose()
    return path


@pytest.fixture
def session_maker(db_path):
    # NullPool: every session opens its own aiosqlite connection on the running loop
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def session(session_maker):
    async with session_maker() as s:
        yield s


@pytest.fixture
def client(session_maker):
    async def _get_session():
        async with session_maker() as s:
            yield s

    app.dependency_overrides[get_async_session] = _get_session
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Build Authorization headers for a tenant/role pair."""
    def _make(tenant_id: str = "t1", role: str = "owner") -> dict:
        token = create_access_token(subject=f"{role}@{tenant_id}", tenant_id=tenant_id, role=role)
        return {"Authorization": f"Bearer {token}"}

    return _make
