"""
Repository tests against a real SQLite database (aiosqlite).

Every statement must be filtered by tenant; these tests create rows under two
tenants and check that neither can see or touch the other's clients.
"""

from datetime import date

import pytest

from scheduling_api.repositories.clients import MAX_CLIENT_ID, ClientRepository


@pytest.fixture
def repo(session):
    return ClientRepository(session)


class TestCreate:
    @pytest.mark.asyncio
    async def test_returns_server_assigned_fields(self, repo):
        created = await repo.create_client("t1", name="Ana", birth_date=date(1990, 5, 5))

        assert created is not None
        assert isinstance(created.id, int)
        assert created.tenant_id == "t1"
        assert created.birth_date == date(1990, 5, 5)
        assert created.created_at is not None
        assert created.updated_at is not None

    @pytest.mark.asyncio
    async def test_empty_optionals_are_stored_as_null(self, repo, session_maker):
        created = await repo.create_client("t1", name="Ana", phone="", email="", notes="", gender="")

        async with session_maker() as fresh:
            stored = await ClientRepository(fresh).get_client("t1", created.id)
        assert stored.phone is None
        assert stored.email is None
        assert stored.notes is None
        assert stored.gender is None
        assert stored.birth_date is None

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, repo):
        a = await repo.create_client("t1", name="Ana")
        b = await repo.create_client("t2", name="Ana")
        assert a.id != b.id


class TestList:
    @pytest.mark.asyncio
    async def test_ordered_by_name_regardless_of_insertion_order(self, repo):
        for name in ["Carla", "Ana", "Bruno"]:
            await repo.create_client("t1", name=name)

        names = [c.name for c in await repo.list_clients("t1")]

        assert names == ["Ana", "Bruno", "Carla"]

    @pytest.mark.asyncio
    async def test_only_returns_own_tenant(self, repo):
        await repo.create_client("t1", name="Ana")
        await repo.create_client("t2", name="Bruno")

        t1 = await repo.list_clients("t1")
        t2 = await repo.list_clients("t2")

        assert [c.name for c in t1] == ["Ana"]
        assert [c.name for c in t2] == ["Bruno"]
        assert await repo.list_clients("t3") == []


class TestGet:
    @pytest.mark.asyncio
    async def test_other_tenant_cannot_read(self, repo):
        created = await repo.create_client("t1", name="Ana")

        assert (await repo.get_client("t1", created.id)).name == "Ana"
        assert await repo.get_client("t2", created.id) is None

    @pytest.mark.asyncio
    async def test_unknown_id(self, repo):
        assert await repo.get_client("t1", 12345) is None


class TestUpdate:
    @pytest.mark.asyncio
    async def test_replaces_fields(self, repo, session_maker):
        created = await repo.create_client("t1", name="Ana", phone="111", notes="vip")

        updated = await repo.update_client(
            "t1", created.id, name="Ana Maria", phone="222", birth_date=date(1991, 1, 2)
        )

        assert updated is not None
        assert updated.id == created.id
        async with session_maker() as fresh:
            stored = await ClientRepository(fresh).get_client("t1", created.id)
        assert stored.name == "Ana Maria"
        assert stored.phone == "222"
        assert stored.notes is None
        assert stored.birth_date == date(1991, 1, 2)

    @pytest.mark.asyncio
    async def test_other_tenant_update_is_noop(self, repo, session_maker):
        created = await repo.create_client("t1", name="Ana")

        result = await repo.update_client("t2", created.id, name="Hijacked")

        assert result is None
        async with session_maker() as fresh:
            stored = await ClientRepository(fresh).get_client("t1", created.id)
        assert stored.name == "Ana"

    @pytest.mark.asyncio
    async def test_missing_id_is_noop(self, repo):
        assert await repo.update_client("t1", 999, name="Nobody") is None
        assert await repo.list_clients("t1") == []


class TestDelete:
    @pytest.mark.asyncio
    async def test_removes_row(self, repo, session_maker):
        created = await repo.create_client("t1", name="Ana")

        assert await repo.delete_client("t1", created.id) == 1

        async with session_maker() as fresh:
            assert await ClientRepository(fresh).get_client("t1", created.id) is None

    @pytest.mark.asyncio
    async def test_other_tenant_delete_is_noop(self, repo, session_maker):
        created = await repo.create_client("t1", name="Ana")

        assert await repo.delete_client("t2", created.id) == 0

        async with session_maker() as fresh:
            assert await ClientRepository(fresh).get_client("t1", created.id) is not None


class TestCount:
    @pytest.mark.asyncio
    async def test_count_is_tenant_scoped(self, repo):
        await repo.create_client("t1", name="Ana")
        await repo.create_client("t1", name="Bruno")
        await repo.create_client("t2", name="Carla")

        assert await repo.count_clients("t1") == 2
        assert await repo.count_clients("t2") == 1


class TestIdRange:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("client_id", [0, -1, MAX_CLIENT_ID + 1, 10**20])
    async def test_unstorable_ids_never_match(self, repo, client_id):
        await repo.create_client("t1", name="Ana")

        assert await repo.get_client("t1", client_id) is None
        assert await repo.update_client("t1", client_id, name="X") is None
        assert await repo.delete_client("t1", client_id) == 0
        assert [c.name for c in await repo.list_clients("t1")] == ["Ana"]
