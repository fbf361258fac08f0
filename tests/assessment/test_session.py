# tests/assessment/test_session.py
import pytest

from services.assessment_engine.loader import get_question_bank
from services.assessment_engine.models import InvalidAnswerError, SessionCompleteError
from services.assessment_engine.session import AssessmentSession, SessionState


@pytest.fixture
def enhanced_session():
    return AssessmentSession(get_question_bank("enhanced"))


@pytest.fixture
def basic_session():
    return AssessmentSession(get_question_bank("basic"))


# --- Test Cases ---

def test_new_session_starts_at_first_question(enhanced_session):
    assert enhanced_session.state is SessionState.IN_PROGRESS
    assert enhanced_session.step_index == 0
    assert enhanced_session.question_index == 0
    assert enhanced_session.current_question.id == "q1"
    assert enhanced_session.answered_count == 0
    assert enhanced_session.total_questions == 30


def test_submit_answer_advances_one_question(enhanced_session):
    assert enhanced_session.submit_answer(4) is None
    assert enhanced_session.answers == {"q1": 4}
    assert enhanced_session.current_question.id == "q2"


def test_submit_rolls_over_to_next_step(enhanced_session):
    for _ in range(7):
        enhanced_session.submit_answer(3)
    assert enhanced_session.step_index == 1
    assert enhanced_session.question_index == 0
    assert enhanced_session.current_question.id == "q8"


def test_invalid_answer_leaves_state_unchanged(enhanced_session):
    enhanced_session.submit_answer(2)
    with pytest.raises(InvalidAnswerError):
        enhanced_session.submit_answer(6)
    assert enhanced_session.current_question.id == "q2"
    assert enhanced_session.answers == {"q1": 2}


def test_previous_is_noop_at_first_question(enhanced_session):
    assert enhanced_session.go_to_previous() is False
    assert (enhanced_session.step_index, enhanced_session.question_index) == (0, 0)


def test_previous_crosses_step_boundary(enhanced_session):
    for _ in range(7):
        enhanced_session.submit_answer(3)
    assert enhanced_session.go_to_previous() is True
    assert enhanced_session.step_index == 0
    assert enhanced_session.question_index == 6
    assert enhanced_session.current_question.id == "q7"


def test_back_then_resubmit_round_trip(enhanced_session):
    """Stepping back and resubmitting the same value leaves the answers unchanged."""
    for value in (1, 2, 3, 4, 5, 1, 2, 3):
        enhanced_session.submit_answer(value)
    before_answers = dict(enhanced_session.answers)
    before_position = (enhanced_session.step_index, enhanced_session.question_index)

    enhanced_session.go_to_previous()
    previous_id = enhanced_session.current_question.id
    enhanced_session.submit_answer(before_answers[previous_id])

    assert enhanced_session.answers == before_answers
    assert (enhanced_session.step_index, enhanced_session.question_index) == before_position


def test_resubmitting_after_back_overwrites_answer(basic_session):
    basic_session.submit_answer(9)
    basic_session.go_to_previous()
    basic_session.submit_answer(2)
    assert basic_session.answers == {"root-1": 2}


def test_completion_scores_and_calls_back():
    received = []
    session = AssessmentSession(get_question_bank("basic"), on_complete=received.append)

    profile = None
    for _ in range(35):
        profile = session.submit_answer(8)

    assert session.is_complete
    assert session.current_question is None
    assert profile is not None
    assert received == [profile]
    assert profile.as_dict() == {key: 6.0 for key in profile.as_dict()}
    assert session.progress == 1.0


def test_complete_session_rejects_answers_and_navigation(basic_session):
    for _ in range(35):
        basic_session.submit_answer(5)
    with pytest.raises(SessionCompleteError):
        basic_session.submit_answer(5)
    with pytest.raises(SessionCompleteError):
        basic_session.go_to_previous()


def test_progress_and_snapshot(enhanced_session):
    for _ in range(3):
        enhanced_session.submit_answer(4)
    snapshot = enhanced_session.snapshot()
    assert snapshot["state"] == "in_progress"
    assert snapshot["answeredCount"] == 3
    assert snapshot["totalQuestions"] == 30
    assert snapshot["progress"] == 0.1
    assert snapshot["step"] == {"stepNumber": 1, "totalSteps": 5, "questionNumber": 4, "questionsInStep": 7}
    assert snapshot["currentQuestion"]["id"] == "q4"
    assert snapshot["currentAnswer"] is None
    assert snapshot["profile"] is None


def test_snapshot_shows_previous_answer_after_going_back(enhanced_session):
    enhanced_session.submit_answer(4)
    enhanced_session.go_to_previous()
    assert enhanced_session.snapshot()["currentAnswer"] == 4
