import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from soulsync.db.models import (
    Base,
    ChakraProfileRecord,
    CoachConversation,
    HealingRitual,
    JournalEntry,
    User,
    UserRecommendation,
)

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# --- Test Fixtures ---

@pytest_asyncio.fixture
async def db_session():
    """Fresh in-memory schema per test."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()
    await engine.dispose()


# --- Model Tests ---

@pytest.mark.asyncio
async def test_user_roundtrip(db_session: AsyncSession):
    db_session.add(User(username="luna", email="luna@example.com", name="Luna"))
    await db_session.commit()

    result = await db_session.execute(select(User).where(User.username == "luna"))
    user = result.scalars().one()
    assert user.id is not None
    assert user.email == "luna@example.com"
    assert user.created_at is not None


@pytest.mark.asyncio
async def test_username_is_unique(db_session: AsyncSession):
    db_session.add(User(username="dup", email="a@example.com"))
    await db_session.commit()
    db_session.add(User(username="dup", email="b@example.com"))
    with pytest.raises(IntegrityError):
        await db_session.commit()


@pytest.mark.asyncio
async def test_one_chakra_profile_per_user(db_session: AsyncSession):
    user = User(username="sol", email="sol@example.com")
    db_session.add(user)
    await db_session.flush()

    values = dict(root=5.0, sacral=5.0, solar_plexus=5.0, heart=5.0, throat=5.0, third_eye=5.0, crown=5.0)
    db_session.add(ChakraProfileRecord(user_id=user.id, **values))
    await db_session.commit()
    db_session.add(ChakraProfileRecord(user_id=user.id, **values))
    with pytest.raises(IntegrityError):
        await db_session.commit()


@pytest.mark.asyncio
async def test_json_columns_roundtrip(db_session: AsyncSession):
    user = User(username="kai", email="kai@example.com")
    db_session.add(user)
    await db_session.flush()

    db_session.add(JournalEntry(
        user_id=user.id,
        content="Felt calm after the walk.",
        sentiment_score=7,
        emotion_tags=["calm", "grateful"],
        chakra_tags=["root"],
        summary="Grounded",
    ))
    db_session.add(CoachConversation(
        user_id=user.id,
        coach_type="inner_child",
        messages=[{"role": "user", "content": "Hi"}],
    ))
    await db_session.commit()

    entry = (await db_session.execute(select(JournalEntry))).scalars().one()
    conversation = (await db_session.execute(select(CoachConversation))).scalars().one()
    assert entry.emotion_tags == ["calm", "grateful"]
    assert entry.chakra_tags == ["root"]
    assert conversation.messages == [{"role": "user", "content": "Hi"}]


@pytest.mark.asyncio
async def test_recommendation_loads_ritual(db_session: AsyncSession):
    user = User(username="ash", email="ash@example.com")
    ritual = HealingRitual(name="Breath", description="Breathe", type="meditation", instructions="Inhale, exhale")
    db_session.add_all([user, ritual])
    await db_session.flush()
    db_session.add(UserRecommendation(user_id=user.id, ritual=ritual))
    await db_session.commit()

    recommendation = (await db_session.execute(select(UserRecommendation))).scalars().one()
    assert recommendation.completed is False
    assert recommendation.ritual.name == "Breath"
