# services/assessment_engine/session.py
# Sequential question traversal for one user taking an assessment.

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

from services.assessment_engine.models import (
    AssessmentStep,
    ChakraProfile,
    Question,
    QuestionBank,
    SessionCompleteError,
)
from services.assessment_engine.scorer import calculate_chakra_scores, validate_answer

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class AssessmentSession:
    """
    In-memory state machine over a question bank.

    Answers are submitted one question at a time, strictly in order. Stepping
    back keeps the earlier answer so it can be shown again and overwritten.
    Once the last question is answered the session is complete, the profile is
    scored and passed to ``on_complete`` if one was given.
    """

    def __init__(
        self,
        bank: QuestionBank,
        on_complete: Optional[Callable[[ChakraProfile], None]] = None,
    ):
        self.bank = bank
        self.on_complete = on_complete
        self.state = SessionState.IN_PROGRESS
        self.step_index = 0
        self.question_index = 0
        self.answers: Dict[str, int] = {}
        self.profile: Optional[ChakraProfile] = None

    @property
    def is_complete(self) -> bool:
        return self.state is SessionState.COMPLETE

    @property
    def current_step(self) -> Optional[AssessmentStep]:
        if self.is_complete:
            return None
        return self.bank.steps[self.step_index]

    @property
    def current_question(self) -> Optional[Question]:
        step = self.current_step
        if step is None:
            return None
        return step.questions[self.question_index]

    @property
    def total_questions(self) -> int:
        return len(self.bank)

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def position(self) -> int:
        """Zero-based index of the current question across all steps."""
        if self.is_complete:
            return self.total_questions
        preceding = sum(len(step.questions) for step in self.bank.steps[:self.step_index])
        return preceding + self.question_index

    @property
    def progress(self) -> float:
        """Fraction of the questionnaire passed, 0.0 to 1.0."""
        return self.position / self.total_questions

    def step_progress(self) -> Dict[str, int]:
        step = self.current_step
        return {
            "stepNumber": self.step_index + 1,
            "totalSteps": len(self.bank.steps),
            "questionNumber": self.question_index + 1 if step else 0,
            "questionsInStep": len(step.questions) if step else 0,
        }

    def submit_answer(self, value: Any) -> Optional[ChakraProfile]:
        """
        Records an answer for the current question and advances by one.
        Returns the scored profile when this answer completes the session.
        """
        if self.is_complete:
            raise SessionCompleteError("Assessment is already complete")

        question = self.current_question
        # Raises InvalidAnswerError before anything is recorded
        self.answers[question.id] = validate_answer(question, value)

        if self.question_index + 1 < len(self.current_step.questions):
            self.question_index += 1
            return None
        if self.step_index + 1 < len(self.bank.steps):
            self.step_index += 1
            self.question_index = 0
            return None

        return self._complete()

    def go_to_previous(self) -> bool:
        """
        Moves back one question, crossing into the previous step's last
        question at a step boundary. Returns False at the very first question.
        """
        if self.is_complete:
            raise SessionCompleteError("Cannot navigate a completed assessment")

        if self.question_index > 0:
            self.question_index -= 1
            return True
        if self.step_index > 0:
            self.step_index -= 1
            self.question_index = len(self.bank.steps[self.step_index].questions) - 1
            return True
        return False

    def _complete(self) -> ChakraProfile:
        self.profile = calculate_chakra_scores(self.answers, self.bank)
        self.state = SessionState.COMPLETE
        logger.info(f"Assessment ({self.bank.mode.value}) completed with {self.answered_count} answers")
        if self.on_complete is not None:
            self.on_complete(self.profile)
        return self.profile

    def snapshot(self) -> Dict[str, Any]:
        """Plain view of the session for presentation."""
        question = self.current_question
        return {
            "mode": self.bank.mode.value,
            "state": self.state.value,
            "stepIndex": self.step_index,
            "questionIndex": self.question_index,
            "answeredCount": self.answered_count,
            "totalQuestions": self.total_questions,
            "progress": round(self.progress, 3),
            "step": self.step_progress(),
            "currentQuestion": question.model_dump(by_alias=True, mode="json") if question else None,
            "currentAnswer": self.answers.get(question.id) if question else None,
            "profile": self.profile.as_dict() if self.profile else None,
        }
