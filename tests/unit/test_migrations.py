from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect

from scheduling_api.api.main import app
from scheduling_api.db import run_migrations


def _schema(path):
    engine = create_engine(f"sqlite:///{path}")
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        indexes = {ix["name"] for ix in inspector.get_indexes("clients")} if "clients" in tables else set()
    finally:
        engine.dispose()
    return tables, indexes


class TestUpgrade:
    def test_creates_clients_table_and_indexes(self, tmp_path, monkeypatch):
        path = tmp_path / "migrated.db"
        monkeypatch.setenv("POSTGRES_URL", f"sqlite+aiosqlite:///{path}")

        run_migrations.upgrade()

        tables, indexes = _schema(path)
        assert {"clients", "alembic_version"} <= tables
        assert {"ix_clients_user_id", "ix_clients_user_id_name"} <= indexes

    def test_second_upgrade_is_a_noop(self, tmp_path, monkeypatch):
        path = tmp_path / "migrated.db"
        monkeypatch.setenv("POSTGRES_URL", f"sqlite+aiosqlite:///{path}")

        run_migrations.upgrade()
        run_migrations.upgrade("head")

        tables, _ = _schema(path)
        assert "clients" in tables


class TestStartup:
    def test_migrates_when_enabled(self, tmp_path, monkeypatch):
        path = tmp_path / "startup.db"
        monkeypatch.setenv("POSTGRES_URL", f"sqlite+aiosqlite:///{path}")
        monkeypatch.setenv("RUN_MIGRATIONS_ON_STARTUP", "true")

        with TestClient(app) as c:
            assert c.get("/api/health").status_code == 200

        tables, _ = _schema(path)
        assert "clients" in tables

    def test_skips_migrations_when_disabled(self, tmp_path, monkeypatch):
        path = tmp_path / "startup.db"
        monkeypatch.setenv("POSTGRES_URL", f"sqlite+aiosqlite:///{path}")
        monkeypatch.setenv("RUN_MIGRATIONS_ON_STARTUP", "false")

        with TestClient(app):
            pass

        tables, _ = _schema(path)
        assert "clients" not in tables
