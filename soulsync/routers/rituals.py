import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from services.assessment_engine.insights import determine_focus_chakra
from services.assessment_engine.models import ChakraProfile
from soulsync.auth.session import get_current_user_id, require_admin
from soulsync.core.exceptions import ConflictError, NotFoundError
from soulsync.db.session import db_session
from soulsync.schemas.rituals import (
    HealingRitualCreate,
    HealingRitualRead,
    RecommendationCreate,
    RecommendationRead,
    RecommendationUpdate,
    SuggestedRituals,
)
from soulsync.services import storage
from soulsync.text_analysis.client import TextAnalysisClient, get_text_analysis_client

router = APIRouter()
logger = logging.getLogger(__name__)

RECENT_EMOTIONS_LIMIT = 5


@router.get("/healing-rituals", response_model=List[HealingRitualRead])
async def list_healing_rituals(
    target_chakra: Optional[str] = Query(None, alias="targetChakra"),
    target_emotion: Optional[str] = Query(None, alias="targetEmotion"),
    session: AsyncSession = Depends(db_session),
):
    return await storage.filter_healing_rituals(session, target_chakra, target_emotion)


@router.post("/healing-rituals", response_model=HealingRitualRead, status_code=status.HTTP_201_CREATED)
async def create_healing_ritual(
    request: HealingRitualCreate,
    admin_id: int = Depends(require_admin),
    session: AsyncSession = Depends(db_session),
):
    """Adds a ritual to the catalogue. Admin only; names are unique."""
    if await storage.get_healing_ritual_by_name(session, request.name) is not None:
        raise ConflictError(f"Healing ritual '{request.name}' already exists")
    fields = request.model_dump()
    fields["target_chakra"] = request.target_chakra.value if request.target_chakra else None
    ritual = await storage.create_healing_ritual(session, **fields)
    logger.info(f"Admin {admin_id} added healing ritual {ritual.id} ({ritual.name})")
    return ritual


@router.get("/healing-rituals/suggested", response_model=SuggestedRituals)
async def suggest_healing_rituals(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
    client: TextAnalysisClient = Depends(get_text_analysis_client),
):
    """
    Rituals for the user's focus chakra and most recent emotions, with
    personalised advice from the text-analysis service.
    """
    profile = await storage.load_profile(session, user_id) or ChakraProfile.neutral()
    focus = determine_focus_chakra(profile)
    trackings = await storage.list_emotion_trackings(session, user_id, limit=RECENT_EMOTIONS_LIMIT)
    recent_emotions = [t.emotion for t in trackings]

    advice = await client.healing_recommendations(profile.as_dict(), recent_emotions)

    rituals = []
    seen_ids = set()
    candidates = await storage.filter_healing_rituals(session, target_chakra=focus["key"])
    for emotion in recent_emotions:
        candidates += await storage.filter_healing_rituals(session, target_emotion=emotion)
    for ritual in candidates:
        if ritual.id not in seen_ids:
            seen_ids.add(ritual.id)
            rituals.append(ritual)

    return SuggestedRituals(
        focus_chakra=focus["key"],
        recent_emotions=recent_emotions,
        ritual_types=advice["ritualTypes"],
        focus_chakras=advice["focusChakras"],
        primary_emotion=advice["primaryEmotion"],
        custom_advice=advice["customAdvice"],
        rituals=rituals,
    )


@router.get("/healing-rituals/{ritual_id}", response_model=HealingRitualRead)
async def get_healing_ritual(ritual_id: int, session: AsyncSession = Depends(db_session)):
    ritual = await storage.get_healing_ritual(session, ritual_id)
    if ritual is None:
        raise NotFoundError("Healing ritual", ritual_id)
    return ritual


@router.post("/recommendations", response_model=RecommendationRead, status_code=status.HTTP_201_CREATED)
async def create_recommendation(
    request: RecommendationCreate,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    if await storage.get_healing_ritual(session, request.ritual_id) is None:
        raise NotFoundError("Healing ritual", request.ritual_id)
    return await storage.create_recommendation(session, user_id, request.ritual_id)


@router.get("/recommendations", response_model=List[RecommendationRead])
async def list_recommendations(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    return await storage.list_recommendations(session, user_id)


@router.patch("/recommendations/{recommendation_id}", response_model=RecommendationRead)
async def update_recommendation(
    recommendation_id: int,
    request: RecommendationUpdate,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    recommendation = await storage.set_recommendation_completed(
        session, recommendation_id, user_id, request.completed
    )
    if recommendation is None:
        raise NotFoundError("Recommendation", recommendation_id)
    return recommendation
