from datetime import datetime
from typing import List, Optional

from pydantic import Field

from services.assessment_engine.models import ChakraKey
from soulsync.schemas.base import CamelModel


class HealingRitualRead(CamelModel):
    id: int
    name: str
    description: str
    type: str
    target_chakra: Optional[str] = None
    target_emotion: Optional[str] = None
    instructions: str


class RecommendationCreate(CamelModel):
    ritual_id: int


class RecommendationUpdate(CamelModel):
    completed: bool


class RecommendationRead(CamelModel):
    id: int
    user_id: int
    ritual_id: int
    completed: bool
    created_at: datetime
    ritual: HealingRitualRead


class SuggestedRituals(CamelModel):
    focus_chakra: str
    recent_emotions: List[str]
    ritual_types: List[str]
    focus_chakras: List[str]
    primary_emotion: str
    custom_advice: str
    rituals: List[HealingRitualRead]


class HealingRitualCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, max_length=64)
    target_chakra: Optional[ChakraKey] = None
    target_emotion: Optional[str] = Field(None, max_length=64)
    instructions: str = Field(..., min_length=1)
