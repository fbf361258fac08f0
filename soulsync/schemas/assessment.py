from typing import Any, Dict, List, Optional

from services.assessment_engine.models import AssessmentMode, AssessmentStep, ChakraProfile
from soulsync.schemas.base import CamelModel


class QuestionCatalogueResponse(CamelModel):
    mode: AssessmentMode
    version: str
    total_questions: int
    steps: List[AssessmentStep]


class ScoreRequest(CamelModel):
    # Values are checked against each question's scale by the scorer
    answers: Dict[str, Any]


class ScoreResponse(CamelModel):
    mode: AssessmentMode
    profile: ChakraProfile
    answered_count: int


class SessionCreateRequest(CamelModel):
    mode: AssessmentMode = AssessmentMode.BASIC


class AnswerSubmission(CamelModel):
    value: Any


class SessionStateResponse(CamelModel):
    session_id: str
    mode: AssessmentMode
    state: str
    step_index: int
    question_index: int
    answered_count: int
    total_questions: int
    progress: float
    step: Dict[str, int]
    step_title: Optional[str] = None
    current_question: Optional[Dict[str, Any]] = None
    current_answer: Optional[int] = None
    profile: Optional[ChakraProfile] = None
    moved: Optional[bool] = None
