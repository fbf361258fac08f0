import asyncio
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from main import app
from soulsync.auth.session import get_current_user_id
from soulsync.db.models import Base
from soulsync.db.session import db_session, get_session_factory
from soulsync.services import storage
from soulsync.services.session_registry import SessionRegistry, get_session_registry
from soulsync.text_analysis.client import (
    CHAT_FALLBACK_REPLY,
    TextAnalysisClient,
    fallback_recommendations,
    get_text_analysis_client,
)

TEST_USER_ID = 1


async def _prepare_database(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with get_session_factory(engine)() as session:
        user = await storage.create_user(session, "seeker", "seeker@example.com", "Seeker")
        await storage.create_user(session, "stranger", "stranger@example.com")
        await storage.seed_default_rituals(session)
        await session.commit()
    assert user.id == TEST_USER_ID


@pytest.fixture
def test_engine(tmp_path):
    """File-backed SQLite so every request gets its own connection."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    asyncio.run(_prepare_database(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(test_engine):
    return get_session_factory(test_engine)


@pytest.fixture
def run_db(session_factory):
    """Runs an async callable against a fresh committed session, for test setup and checks."""
    def _run(fn):
        async def _inner():
            async with session_factory() as session:
                result = await fn(session)
                await session.commit()
                return result
        return asyncio.run(_inner())
    return _run


@pytest.fixture
def mock_analyzer():
    analyzer = AsyncMock(spec=TextAnalysisClient)
    analyzer.analyze.return_value = {
        "sentimentScore": 8,
        "emotionTags": ["grateful", "calm"],
        "chakraTags": ["heart"],
        "summary": "A grateful, settled day.",
    }
    analyzer.chat.return_value = CHAT_FALLBACK_REPLY
    analyzer.healing_recommendations.return_value = fallback_recommendations()
    return analyzer


@pytest.fixture
def client(session_factory, mock_analyzer):
    """TestClient with the database, auth, registry and text analysis replaced."""
    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    registry = SessionRegistry()
    app.dependency_overrides[db_session] = override_db_session
    app.dependency_overrides[get_current_user_id] = lambda: TEST_USER_ID
    app.dependency_overrides[get_session_registry] = lambda: registry
    app.dependency_overrides[get_text_analysis_client] = lambda: mock_analyzer

    # Not entered as a context manager, so the lifespan (init_db) does not run
    yield TestClient(app)
    app.dependency_overrides.clear()
