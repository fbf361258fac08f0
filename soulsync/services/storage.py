"""
Async persistence functions over an AsyncSession.

Callers pass the user id explicitly; nothing here reads request or session
state. Functions flush but never commit, the request-scoped ``db_session``
dependency owns the transaction.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from services.assessment_engine.models import AssessmentMode, ChakraProfile
from soulsync.db.models import (
    ChakraProfileRecord,
    CoachConversation,
    EmotionTracking,
    HealingRitual,
    JournalEntry,
    User,
    UserRecommendation,
)

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = ("root", "sacral", "solar_plexus", "heart", "throat", "third_eye", "crown")

DEFAULT_RITUALS: List[Dict[str, Any]] = [
    {
        "name": "Crown Chakra Visualization",
        "description": "Connect with universal consciousness and expand your spiritual awareness",
        "type": "visualization",
        "target_chakra": "crown",
        "target_emotion": "confusion",
        "instructions": "Find a quiet space, close your eyes, and visualize a violet light at the crown of your head. As you breathe deeply, imagine this light expanding and connecting you to universal wisdom.",
    },
    {
        "name": "Third Eye Meditation",
        "description": "Enhance intuition and inner vision",
        "type": "meditation",
        "target_chakra": "thirdEye",
        "target_emotion": "doubt",
        "instructions": "Sit comfortably with eyes closed. Focus attention on the area between your eyebrows. Visualize an indigo light growing brighter with each breath, opening your inner eye to deeper insights.",
    },
    {
        "name": "Throat Chakra Sound Healing",
        "description": "Release blocked expression and find your authentic voice",
        "type": "sound_healing",
        "target_chakra": "throat",
        "target_emotion": "fear",
        "instructions": "Sit in a comfortable position and take deep breaths. Begin making the sound 'HAM' while focusing on your throat area. Feel the vibration releasing any blocks to your self-expression.",
    },
    {
        "name": "Heart-Opening Affirmations",
        "description": "Nurture compassion and self-love",
        "type": "affirmation",
        "target_chakra": "heart",
        "target_emotion": "grief",
        "instructions": "Place your hands over your heart. Breathe deeply and repeat: 'I am open to giving and receiving love. I deeply and completely love and accept myself.' Feel your heart space expanding with each repetition.",
    },
    {
        "name": "Solar Plexus Empowerment",
        "description": "Build confidence and personal power",
        "type": "visualization",
        "target_chakra": "solarPlexus",
        "target_emotion": "shame",
        "instructions": "Lie down comfortably. Place hands over your solar plexus (above navel). Visualize a bright yellow sun growing in this area with each breath, filling you with confidence and personal power.",
    },
    {
        "name": "Sacral Chakra Creativity Flow",
        "description": "Unlock creative energy and emotional fluidity",
        "type": "movement",
        "target_chakra": "sacral",
        "target_emotion": "guilt",
        "instructions": "Put on flowing music and allow your hips to sway gently. Focus on the area below your navel. Let movements become intuitive, expressing emotional release through free-form dance.",
    },
    {
        "name": "Root Chakra Grounding",
        "description": "Establish safety and security within yourself",
        "type": "somatic",
        "target_chakra": "root",
        "target_emotion": "anxiety",
        "instructions": "Stand barefoot on the earth if possible. Feel your feet connecting to the ground. Visualize roots growing from your feet deep into the earth, drawing up stability and security into your body.",
    },
    {
        "name": "Emotional Release Journaling",
        "description": "Process and release difficult emotions through writing",
        "type": "journaling",
        "target_chakra": None,
        "target_emotion": "anger",
        "instructions": "Take a blank page and write continuously without editing or judgment. Begin with 'I feel...' and allow all emotions to flow onto the page without restriction. When complete, you may destroy the page as a symbol of release.",
    },
    {
        "name": "Joy Activation Practice",
        "description": "Cultivate and amplify feelings of joy and gratitude",
        "type": "mindfulness",
        "target_chakra": None,
        "target_emotion": "depression",
        "instructions": "Recall a memory when you felt pure joy. Relive this moment with all your senses - what you saw, heard, felt. Allow the feeling to expand throughout your body. Place your hand on your heart and set an intention to carry this joy forward.",
    },
    {
        "name": "Full Chakra Balancing Meditation",
        "description": "Harmonize all energy centers for complete alignment",
        "type": "meditation",
        "target_chakra": None,
        "target_emotion": None,
        "instructions": "Sit comfortably with spine straight. Visualize each chakra from root to crown, spending 1-2 minutes at each center. See each chakra as a spinning wheel of light in its respective color, clearing and balancing each one before moving upward.",
    },
]


# --- Users ---

async def create_user(session: AsyncSession, username: str, email: str, name: Optional[str] = None) -> User:
    user = User(username=username, email=email, name=name)
    session.add(user)
    await session.flush()
    logger.info(f"Created user {user.id} ({username})")
    return user


async def get_user(session: AsyncSession, user_id: int) -> Optional[User]:
    return await session.get(User, user_id)


async def get_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalars().first()


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalars().first()


# --- Chakra profiles ---

def _record_to_profile(record: ChakraProfileRecord) -> ChakraProfile:
    return ChakraProfile(**{column: getattr(record, column) for column in PROFILE_COLUMNS})


async def get_profile_record(session: AsyncSession, user_id: int) -> Optional[ChakraProfileRecord]:
    result = await session.execute(select(ChakraProfileRecord).where(ChakraProfileRecord.user_id == user_id))
    return result.scalars().first()


async def save_profile(
    session: AsyncSession,
    user_id: int,
    profile: ChakraProfile,
    mode: Optional[AssessmentMode] = None,
) -> ChakraProfileRecord:
    """Creates the user's profile, or replaces every intensity of the existing one."""
    record = await get_profile_record(session, user_id)
    values = {column: getattr(profile, column) for column in PROFILE_COLUMNS}
    mode_value = AssessmentMode(mode).value if mode is not None else None

    if record is None:
        record = ChakraProfileRecord(user_id=user_id, assessment_mode=mode_value, **values)
        session.add(record)
        logger.info(f"Creating chakra profile for user {user_id}")
    else:
        for column, value in values.items():
            setattr(record, column, value)
        record.assessment_mode = mode_value
        logger.info(f"Replacing chakra profile for user {user_id}")

    await session.flush()
    return record


async def load_profile(session: AsyncSession, user_id: int) -> Optional[ChakraProfile]:
    record = await get_profile_record(session, user_id)
    return _record_to_profile(record) if record is not None else None


# --- Journal ---

async def create_journal_entry(
    session: AsyncSession,
    user_id: int,
    content: str,
    analysis: Dict[str, Any],
) -> JournalEntry:
    entry = JournalEntry(
        user_id=user_id,
        content=content,
        sentiment_score=analysis.get("sentimentScore"),
        emotion_tags=list(analysis.get("emotionTags") or []),
        chakra_tags=list(analysis.get("chakraTags") or []),
        summary=analysis.get("summary"),
    )
    session.add(entry)
    await session.flush()
    return entry


async def list_journal_entries(session: AsyncSession, user_id: int) -> List[JournalEntry]:
    result = await session.execute(
        select(JournalEntry)
        .where(JournalEntry.user_id == user_id)
        .order_by(JournalEntry.created_at.desc(), JournalEntry.id.desc())
    )
    return list(result.scalars().all())


# --- Emotion tracking ---

async def create_emotion_tracking(
    session: AsyncSession,
    user_id: int,
    emotion: str,
    intensity: int,
    note: Optional[str] = None,
) -> EmotionTracking:
    tracking = EmotionTracking(user_id=user_id, emotion=emotion, intensity=intensity, note=note)
    session.add(tracking)
    await session.flush()
    return tracking


async def list_emotion_trackings(
    session: AsyncSession, user_id: int, limit: Optional[int] = None
) -> List[EmotionTracking]:
    stmt = (
        select(EmotionTracking)
        .where(EmotionTracking.user_id == user_id)
        .order_by(EmotionTracking.created_at.desc(), EmotionTracking.id.desc())
    )
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await session.execute(stmt)
    return list(result.scalars().all())


# --- Coach conversations ---

async def create_coach_conversation(
    session: AsyncSession,
    user_id: int,
    coach_type: str,
    messages: List[Dict[str, str]],
) -> CoachConversation:
    conversation = CoachConversation(user_id=user_id, coach_type=coach_type, messages=list(messages))
    session.add(conversation)
    await session.flush()
    return conversation


async def get_coach_conversation(
    session: AsyncSession, conversation_id: int, user_id: int
) -> Optional[CoachConversation]:
    """Returns the conversation only when it belongs to ``user_id``."""
    result = await session.execute(
        select(CoachConversation).where(
            CoachConversation.id == conversation_id,
            CoachConversation.user_id == user_id,
        )
    )
    return result.scalars().first()


async def list_coach_conversations(
    session: AsyncSession, user_id: int, coach_type: str
) -> List[CoachConversation]:
    result = await session.execute(
        select(CoachConversation)
        .where(CoachConversation.user_id == user_id, CoachConversation.coach_type == coach_type)
        .order_by(CoachConversation.updated_at.desc(), CoachConversation.id.desc())
    )
    return list(result.scalars().all())


async def append_coach_messages(
    session: AsyncSession,
    conversation: CoachConversation,
    messages: List[Dict[str, str]],
) -> CoachConversation:
    # Reassign so the JSON column is flagged dirty
    conversation.messages = list(conversation.messages or []) + list(messages)
    await session.flush()
    return conversation


async def delete_coach_conversation(session: AsyncSession, conversation_id: int, user_id: int) -> bool:
    result = await session.execute(
        delete(CoachConversation).where(
            CoachConversation.id == conversation_id,
            CoachConversation.user_id == user_id,
        )
    )
    return result.rowcount > 0


# --- Healing rituals ---

async def list_healing_rituals(session: AsyncSession) -> List[HealingRitual]:
    result = await session.execute(select(HealingRitual).order_by(HealingRitual.id))
    return list(result.scalars().all())


async def get_healing_ritual(session: AsyncSession, ritual_id: int) -> Optional[HealingRitual]:
    return await session.get(HealingRitual, ritual_id)


async def get_healing_ritual_by_name(session: AsyncSession, name: str) -> Optional[HealingRitual]:
    result = await session.execute(select(HealingRitual).where(HealingRitual.name == name))
    return result.scalars().first()


async def filter_healing_rituals(
    session: AsyncSession,
    target_chakra: Optional[str] = None,
    target_emotion: Optional[str] = None,
) -> List[HealingRitual]:
    """Rituals matching every filter given; no filters returns all of them."""
    stmt = select(HealingRitual).order_by(HealingRitual.id)
    if target_chakra:
        stmt = stmt.where(HealingRitual.target_chakra == target_chakra)
    if target_emotion:
        stmt = stmt.where(HealingRitual.target_emotion == target_emotion)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def create_healing_ritual(session: AsyncSession, **fields: Any) -> HealingRitual:
    ritual = HealingRitual(**fields)
    session.add(ritual)
    await session.flush()
    return ritual


async def seed_default_rituals(session: AsyncSession) -> int:
    """Inserts the default rituals into an empty table. Returns how many were added."""
    existing = await session.scalar(select(func.count()).select_from(HealingRitual))
    if existing:
        return 0
    for fields in DEFAULT_RITUALS:
        await create_healing_ritual(session, **fields)
    logger.info(f"Seeded {len(DEFAULT_RITUALS)} default healing rituals")
    return len(DEFAULT_RITUALS)


# --- Recommendations ---

async def create_recommendation(session: AsyncSession, user_id: int, ritual_id: int) -> UserRecommendation:
    ritual = await session.get(HealingRitual, ritual_id)
    recommendation = UserRecommendation(user_id=user_id, ritual=ritual, completed=False)
    session.add(recommendation)
    await session.flush()
    return recommendation


async def list_recommendations(session: AsyncSession, user_id: int) -> List[UserRecommendation]:
    result = await session.execute(
        select(UserRecommendation)
        .where(UserRecommendation.user_id == user_id)
        .order_by(UserRecommendation.created_at.desc(), UserRecommendation.id.desc())
    )
    return list(result.scalars().unique().all())


async def set_recommendation_completed(
    session: AsyncSession, recommendation_id: int, user_id: int, completed: bool
) -> Optional[UserRecommendation]:
    result = await session.execute(
        select(UserRecommendation).where(
            UserRecommendation.id == recommendation_id,
            UserRecommendation.user_id == user_id,
        )
    )
    recommendation = result.scalars().first()
    if recommendation is None:
        return None
    recommendation.completed = completed
    await session.flush()
    return recommendation
