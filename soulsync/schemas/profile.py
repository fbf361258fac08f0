from datetime import datetime
from typing import Any, Dict, List, Optional

from services.assessment_engine.models import ChakraProfile
from soulsync.schemas.base import CamelModel


class FocusChakra(CamelModel):
    key: str
    name: str
    sanskrit_name: str
    direction: str
    value: float
    description: str
    healing_practices: List[str]


class CoachRecommendation(CamelModel):
    focus_chakra: FocusChakra
    recommended_coach: str
    coaching_focus: List[str]
    general_recommendation: str


class ChakraProfileResponse(CamelModel):
    user_id: int
    profile: ChakraProfile
    is_default: bool
    assessment_mode: Optional[str] = None
    updated_at: Optional[datetime] = None
    insights: CoachRecommendation


class ChakraReference(CamelModel):
    key: str
    details: Dict[str, Any]
