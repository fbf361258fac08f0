# tests/assessment/test_scorer.py
import pytest

from services.assessment_engine.loader import build_question_bank, get_question_bank
from services.assessment_engine.models import (
    AnswerScale,
    ChakraProfile,
    InconsistentScaleError,
    InvalidAnswerError,
    QuestionBank,
)
from services.assessment_engine.scorer import (
    calculate_chakra_scores,
    normalize_intensity,
    round_half_up,
    validate_answer,
)

CANONICAL_KEYS = ["root", "sacral", "solarPlexus", "heart", "throat", "thirdEye", "crown"]


# --- Helper Function ---
def make_bank(*questions, mode="basic"):
    """Builds a single-step question bank from (id, chakra, scale, inverse) tuples."""
    return build_question_bank({
        "version": "test",
        "mode": mode,
        "steps": [{
            "id": "step-1",
            "title": "Test step",
            "questions": [
                {"id": qid, "text": f"Question {qid}", "chakra": chakra, "answerScale": scale, "inverseScoring": inverse}
                for qid, chakra, scale, inverse in questions
            ],
        }],
    })


def all_values(profile: ChakraProfile) -> dict:
    return profile.as_dict()


# --- Test Cases ---

def test_empty_answers_give_neutral_profile():
    """No answers → every chakra at the 5.0 midpoint."""
    profile = calculate_chakra_scores({}, get_question_bank("basic"))
    assert all_values(profile) == {key: 5.0 for key in CANONICAL_KEYS}


def test_profile_has_exactly_seven_canonical_keys_in_range():
    bank = get_question_bank("enhanced")
    answers = {q.id: (i % 5) + 1 for i, q in enumerate(bank.questions)}
    values = all_values(calculate_chakra_scores(answers, bank))
    assert list(values.keys()) == CANONICAL_KEYS
    assert all(1.0 <= v <= 10.0 for v in values.values())


def test_scoring_is_idempotent():
    bank = get_question_bank("basic")
    answers = {q.id: (i % 10) + 1 for i, q in enumerate(bank.questions)}
    assert calculate_chakra_scores(answers, bank) == calculate_chakra_scores(answers, bank)


def test_inverse_linear_question_inverts_raw_value():
    """Raw 3 on an inverse 1-10 root question contributes 11 - 3 = 8."""
    bank = make_bank(("r-inv", "root", "linear_ten", True))
    values = all_values(calculate_chakra_scores({"r-inv": 3}, bank))
    assert values["root"] == 8.0
    assert all(values[k] == 5.0 for k in CANONICAL_KEYS if k != "root")


def test_categorical_question_is_doubled():
    bank = make_bank(("h1", "heart", "categorical_five", False), mode="enhanced")
    assert calculate_chakra_scores({"h1": 5}, bank).heart == 10.0
    assert calculate_chakra_scores({"h1": 1}, bank).heart == 2.0


def test_categorical_inverse_question():
    bank = make_bank(("h1", "heart", "categorical_five", True), mode="enhanced")
    # 6 - 2 = 4 → 8.0
    assert calculate_chakra_scores({"h1": 2}, bank).heart == 8.0


def test_all_targeted_question_fans_out_to_every_chakra():
    bank = make_bank(("general", "all", "linear_ten", False))
    values = all_values(calculate_chakra_scores({"general": 8}, bank))
    assert values == {key: 8.0 for key in CANONICAL_KEYS}


def test_single_answer_only_moves_its_chakra():
    bank = get_question_bank("basic")
    values = all_values(calculate_chakra_scores({"throat-1": 9}, bank))
    assert values["throat"] == 9.0
    assert all(values[k] == 5.0 for k in CANONICAL_KEYS if k != "throat")


def test_linear_average_rounds_half_up_to_one_decimal():
    bank = make_bank(
        ("a", "crown", "linear_ten", False),
        ("b", "crown", "linear_ten", False),
        ("c", "crown", "linear_ten", False),
        ("d", "crown", "linear_ten", False),
    )
    # (7 + 7 + 7 + 8) / 4 = 7.25 → 7.3
    assert calculate_chakra_scores({"a": 7, "b": 7, "c": 7, "d": 8}, bank).crown == 7.3


def test_categorical_average_rounds_to_one_decimal():
    bank = make_bank(
        ("a", "sacral", "categorical_five", False),
        ("b", "sacral", "categorical_five", False),
        ("c", "sacral", "categorical_five", False),
        mode="enhanced",
    )
    # mean(5, 4, 4) * 2 = 8.666… → 8.7
    assert calculate_chakra_scores({"a": 5, "b": 4, "c": 4}, bank).sacral == 8.7


def test_basic_all_eights_is_symmetric_across_chakras():
    """Each chakra has three forward and two reverse items, so identical answers land identically."""
    bank = get_question_bank("basic")
    answers = {q.id: 8 for q in bank.questions}
    values = all_values(calculate_chakra_scores(answers, bank))
    assert len(set(values.values())) == 1
    # (8 * 3 + 3 * 2) / 5
    assert values["root"] == 6.0


def test_enhanced_full_max_answers():
    bank = get_question_bank("enhanced")
    answers = {q.id: 5 for q in bank.questions}
    values = all_values(calculate_chakra_scores(answers, bank))
    # Crown: q5=5, q10=5, q15 inverse=1, r2=5, r5=5, r1(all)=5 → mean 26/6 * 2 = 8.666… → 8.7
    assert values["crown"] == 8.7
    assert all(2.0 <= v <= 10.0 for v in values.values())


def test_out_of_scale_values_raise_invalid_answer():
    linear = make_bank(("l1", "root", "linear_ten", False))
    categorical = make_bank(("c1", "heart", "categorical_five", False), mode="enhanced")

    with pytest.raises(InvalidAnswerError) as excinfo:
        calculate_chakra_scores({"l1": 11}, linear)
    assert excinfo.value.question_id == "l1"

    with pytest.raises(InvalidAnswerError):
        calculate_chakra_scores({"c1": 0}, categorical)

    with pytest.raises(InvalidAnswerError):
        calculate_chakra_scores({"c1": 6}, categorical)


def test_unknown_question_id_raises_invalid_answer():
    with pytest.raises(InvalidAnswerError, match="Unknown question ID"):
        calculate_chakra_scores({"nope": 3}, get_question_bank("basic"))


@pytest.mark.parametrize("raw", [7.5, "7", None, True])
def test_non_integer_answers_are_rejected(raw):
    bank = make_bank(("l1", "root", "linear_ten", False))
    with pytest.raises(InvalidAnswerError):
        calculate_chakra_scores({"l1": raw}, bank)


def test_mixed_scales_for_one_chakra_raise():
    """A bank mixing scales under one chakra is rejected while it is built."""
    with pytest.raises(InconsistentScaleError):
        make_bank(
            ("l1", "root", "linear_ten", False),
            ("c1", "root", "categorical_five", False),
        )


def test_validate_answer_returns_int():
    question = get_question_bank("basic").get("root-1")
    assert validate_answer(question, 10) == 10


def test_normalize_intensity_clamps_and_rounds():
    assert normalize_intensity(5.0, AnswerScale.CATEGORICAL_FIVE) == 10.0
    assert normalize_intensity(0.2, AnswerScale.LINEAR_TEN) == 1.0
    assert normalize_intensity(6.45, AnswerScale.LINEAR_TEN) == 6.5


def test_round_half_up():
    assert round_half_up(2.25) == 2.3
    assert round_half_up(2.5, 0) == 3.0
    assert round_half_up(8.0) == 8.0


def test_scorer_rejects_mixed_scales_in_unchecked_bank():
    """Scoring still refuses to average across scales if a bank skipped the self-check."""
    bank = QuestionBank.model_validate({
        "version": "test",
        "mode": "basic",
        "steps": [{
            "id": "s",
            "title": "Mixed",
            "questions": [
                {"id": "l1", "text": "Linear", "chakra": "root", "answerScale": "linear_ten"},
                {"id": "all1", "text": "General", "chakra": "all", "answerScale": "categorical_five"},
            ],
        }],
    })
    with pytest.raises(InconsistentScaleError):
        calculate_chakra_scores({"l1": 4, "all1": 3}, bank)
