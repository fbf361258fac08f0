from datetime import datetime
from typing import List, Optional

from pydantic import Field

from soulsync.schemas.base import CamelModel


class JournalEntryCreate(CamelModel):
    content: str = Field(..., min_length=1, max_length=20000)


class JournalEntryRead(CamelModel):
    id: int
    user_id: int
    content: str
    sentiment_score: Optional[int] = None
    emotion_tags: List[str] = []
    chakra_tags: List[str] = []
    summary: Optional[str] = None
    created_at: datetime


class EmotionTrackingCreate(CamelModel):
    emotion: str = Field(..., min_length=1, max_length=64)
    intensity: int = Field(..., ge=1, le=10)
    note: Optional[str] = None


class EmotionTrackingRead(CamelModel):
    id: int
    user_id: int
    emotion: str
    intensity: int
    note: Optional[str] = None
    created_at: datetime
