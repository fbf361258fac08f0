import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from services.assessment_engine.loader import get_question_bank
from services.assessment_engine.models import (
    AssessmentMode,
    InvalidAnswerError,
    QuestionBank,
    SessionCompleteError,
)
from services.assessment_engine.scorer import calculate_chakra_scores
from services.assessment_engine.session import AssessmentSession
from soulsync.auth.session import get_current_user_id
from soulsync.core.exceptions import ConflictError, NotFoundError, ValidationError
from soulsync.db.session import db_session
from soulsync.schemas.assessment import (
    AnswerSubmission,
    QuestionCatalogueResponse,
    ScoreRequest,
    ScoreResponse,
    SessionCreateRequest,
    SessionStateResponse,
)
from soulsync.services import storage
from soulsync.services.session_registry import SessionRegistry, get_session_registry

router = APIRouter()
logger = logging.getLogger(__name__)


def get_bank_for_mode(mode: str) -> QuestionBank:
    try:
        return get_question_bank(AssessmentMode(mode))
    except ValueError:
        raise NotFoundError("Assessment mode", mode)


def _session_state(session_id: str, session: AssessmentSession, moved: Optional[bool] = None) -> Dict[str, Any]:
    snapshot = session.snapshot()
    step = session.current_step
    return {
        "sessionId": session_id,
        "mode": snapshot["mode"],
        "state": snapshot["state"],
        "stepIndex": snapshot["stepIndex"],
        "questionIndex": snapshot["questionIndex"],
        "answeredCount": snapshot["answeredCount"],
        "totalQuestions": snapshot["totalQuestions"],
        "progress": snapshot["progress"],
        "step": snapshot["step"],
        "stepTitle": step.title if step else None,
        "currentQuestion": snapshot["currentQuestion"],
        "currentAnswer": snapshot["currentAnswer"],
        "profile": session.profile,
        "moved": moved,
    }


def _get_owned_session(registry: SessionRegistry, session_id: str, user_id: int) -> AssessmentSession:
    session = registry.get(session_id, user_id)
    if session is None:
        raise NotFoundError("Assessment session", session_id)
    return session


@router.get("/assessment/{mode}/questions", response_model=QuestionCatalogueResponse)
async def get_questions(mode: str):
    """Question catalogue for a mode, grouped into steps."""
    bank = get_bank_for_mode(mode)
    return QuestionCatalogueResponse(
        mode=bank.mode,
        version=bank.version,
        total_questions=len(bank),
        steps=bank.steps,
    )


@router.post("/assessment/{mode}/score", response_model=ScoreResponse)
async def score_assessment(
    mode: str,
    request: ScoreRequest,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """
    Scores a full answer set in one call and stores the result as the
    user's chakra profile, replacing any earlier one.
    """
    bank = get_bank_for_mode(mode)
    try:
        profile = calculate_chakra_scores(request.answers, bank)
    except InvalidAnswerError as e:
        logger.warning(f"Invalid answer from user {user_id}: {e}")
        raise ValidationError(str(e), field=e.question_id)

    await storage.save_profile(session, user_id, profile, bank.mode)
    logger.info(f"Scored {bank.mode.value} assessment for user {user_id}")
    return ScoreResponse(mode=bank.mode, profile=profile, answered_count=len(request.answers))


@router.post("/assessment/sessions", response_model=SessionStateResponse, status_code=status.HTTP_201_CREATED)
async def start_session(
    request: SessionCreateRequest,
    user_id: int = Depends(get_current_user_id),
    registry: SessionRegistry = Depends(get_session_registry),
):
    session_id, assessment = registry.create(user_id, request.mode)
    return _session_state(session_id, assessment)


@router.get("/assessment/sessions/{session_id}", response_model=SessionStateResponse)
async def get_session_state(
    session_id: str,
    user_id: int = Depends(get_current_user_id),
    registry: SessionRegistry = Depends(get_session_registry),
):
    return _session_state(session_id, _get_owned_session(registry, session_id, user_id))


@router.post("/assessment/sessions/{session_id}/answers", response_model=SessionStateResponse)
async def submit_session_answer(
    session_id: str,
    submission: AnswerSubmission,
    user_id: int = Depends(get_current_user_id),
    registry: SessionRegistry = Depends(get_session_registry),
    session: AsyncSession = Depends(db_session),
):
    """
    Answers the current question. The answer that completes the assessment
    saves the profile and ends the session.

    A session still in the registry after completion is one whose save
    failed; posting again retries the save and the submitted value is ignored.
    """
    assessment = _get_owned_session(registry, session_id, user_id)
    if assessment.is_complete:
        logger.warning(f"Retrying profile save for completed assessment session {session_id}")
        profile = assessment.profile
    else:
        try:
            profile = assessment.submit_answer(submission.value)
        except InvalidAnswerError as e:
            raise ValidationError(str(e), field=e.question_id)

    if profile is not None:
        await storage.save_profile(session, user_id, profile, assessment.bank.mode)
        # The session stays registered until its profile is committed
        await session.commit()
        registry.discard(session_id)
        logger.info(f"Assessment session {session_id} completed; profile saved for user {user_id}")

    return _session_state(session_id, assessment)


@router.post("/assessment/sessions/{session_id}/previous", response_model=SessionStateResponse)
async def go_to_previous_question(
    session_id: str,
    user_id: int = Depends(get_current_user_id),
    registry: SessionRegistry = Depends(get_session_registry),
):
    assessment = _get_owned_session(registry, session_id, user_id)
    try:
        moved = assessment.go_to_previous()
    except SessionCompleteError as e:
        raise ConflictError(str(e))
    return _session_state(session_id, assessment, moved=moved)
