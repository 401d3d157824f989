from core.config import database_config
from core.config.database_config import check_connection, create_engine, create_session_factory


def test_database_url_env_wins(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./other.db")
    monkeypatch.setattr(database_config, "PG_HOST", "db.example.com")

    assert database_config.resolve_database_url() == "sqlite+aiosqlite:///./other.db"


def test_sqlite_fallback_without_pg_host(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setattr(database_config, "PG_HOST", None)

    assert database_config.resolve_database_url() == database_config.SQLITE_DATABASE_URL


def test_postgres_url_requires_ssl_outside_localhost(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setattr(database_config, "PG_HOST", "db.example.com")
    monkeypatch.setattr(database_config, "PG_PORT", "5432")
    monkeypatch.setattr(database_config, "PG_USER", "user")
    monkeypatch.setattr(database_config, "PG_PASSWORD", "pw")
    monkeypatch.setattr(database_config, "PG_DATABASE", "ideas")

    url = database_config.resolve_database_url()

    assert url == "postgresql+asyncpg://user:pw@db.example.com:5432/ideas?ssl=require"


def test_postgres_url_on_localhost_has_no_ssl(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setattr(database_config, "PG_HOST", "localhost")
    monkeypatch.setattr(database_config, "PG_PORT", "5432")
    monkeypatch.setattr(database_config, "PG_USER", "user")
    monkeypatch.setattr(database_config, "PG_PASSWORD", "pw")
    monkeypatch.setattr(database_config, "PG_DATABASE", "ideas")

    assert not database_config.resolve_database_url().endswith("ssl=require")


async def test_check_connection(engine):
    assert await check_connection(create_session_factory(engine)) is True


async def test_check_connection_failure(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'ideas.db'}", echo=False)
    try:
        assert await check_connection(create_session_factory(engine)) is False
    finally:
        await engine.dispose()
