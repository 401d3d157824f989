import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core.config.database_config import create_engine, create_session_factory, create_tables
from domain.idea.repository.idea_repository import IdeaRepository
from domain.idea.service.idea_service import IdeaService
from main import create_app


@pytest_asyncio.fixture
async def engine(tmp_path):
    """테스트마다 새 SQLite 파일 DB"""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'ideas.db'}", echo=False)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def idea_repository(session_factory):
    return IdeaRepository(session_factory)


@pytest_asyncio.fixture
async def idea_service(idea_repository):
    return IdeaService(idea_repository)


@pytest_asyncio.fixture
async def client(session_factory):
    app = create_app(session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
