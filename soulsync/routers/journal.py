import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from soulsync.auth.session import get_current_user_id
from soulsync.db.session import db_session
from soulsync.schemas.journal import (
    EmotionTrackingCreate,
    EmotionTrackingRead,
    JournalEntryCreate,
    JournalEntryRead,
)
from soulsync.services import storage
from soulsync.text_analysis.client import TextAnalysisClient, get_text_analysis_client

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/journal-entries", response_model=JournalEntryRead, status_code=status.HTTP_201_CREATED)
async def create_journal_entry(
    request: JournalEntryCreate,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
    analyzer: TextAnalysisClient = Depends(get_text_analysis_client),
):
    """Analyzes the entry text, then stores it with its sentiment and tags."""
    analysis = await analyzer.analyze(request.content)
    entry = await storage.create_journal_entry(session, user_id, request.content, analysis)
    logger.info(f"Stored journal entry {entry.id} for user {user_id} (sentiment {entry.sentiment_score})")
    return entry


@router.get("/journal-entries", response_model=List[JournalEntryRead])
async def list_journal_entries(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    return await storage.list_journal_entries(session, user_id)


@router.post("/emotion-tracking", response_model=EmotionTrackingRead, status_code=status.HTTP_201_CREATED)
async def create_emotion_tracking(
    request: EmotionTrackingCreate,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    return await storage.create_emotion_tracking(
        session, user_id, request.emotion.strip().lower(), request.intensity, request.note
    )


@router.get("/emotion-tracking", response_model=List[EmotionTrackingRead])
async def list_emotion_trackings(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    return await storage.list_emotion_trackings(session, user_id)
