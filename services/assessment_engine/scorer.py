# services/assessment_engine/scorer.py
# Reduces an answer set into a seven-chakra intensity profile.

import logging
import math
from typing import Any, Dict, List, Mapping, Optional

from services.assessment_engine.models import (
    CHAKRA_KEYS,
    MAX_INTENSITY,
    MIN_INTENSITY,
    NEUTRAL_INTENSITY,
    AnswerScale,
    ChakraKey,
    ChakraProfile,
    InconsistentScaleError,
    InvalidAnswerError,
    Question,
    QuestionBank,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float, ndigits: int = 1) -> float:
    """Rounds .5 away from zero for positive values, unlike the builtin banker's round()."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def clamp_intensity(value: float) -> float:
    return max(MIN_INTENSITY, min(MAX_INTENSITY, value))


def validate_answer(question: Question, raw_value: Any) -> int:
    """
    Checks a raw answer against the question's declared scale.
    Returns the value as an int, raises InvalidAnswerError otherwise.
    """
    scale_max = question.answer_scale.max_value
    # bool is an int subclass, but True/False are never valid answers
    if isinstance(raw_value, bool) or not isinstance(raw_value, int):
        raise InvalidAnswerError(
            f"Answer for question '{question.id}' must be an integer between 1 and {scale_max}, got {raw_value!r}",
            question_id=question.id,
        )
    if not 1 <= raw_value <= scale_max:
        raise InvalidAnswerError(
            f"Answer {raw_value} for question '{question.id}' is outside the range 1-{scale_max}",
            question_id=question.id,
        )
    return raw_value


def answer_signal(question: Question, raw_value: int) -> int:
    """Raw value as a chakra signal, inverted for negatively phrased questions."""
    if question.inverse_scoring:
        return question.answer_scale.max_value + 1 - raw_value
    return raw_value


def normalize_intensity(raw_average: float, scale: AnswerScale) -> float:
    """
    Maps the mean signal of one chakra onto the 1-10 output range.
    LinearTen averages pass through, CategoricalFive averages are doubled.
    Both are rounded half-up to one decimal and clamped.
    """
    return clamp_intensity(round_half_up(raw_average * scale.output_factor, 1))


def calculate_chakra_scores(answers: Mapping[str, Any], bank: QuestionBank) -> ChakraProfile:
    """
    Scores an answer set (question id -> raw value) against a question bank.

    Chakras no answered question touches stay at the neutral midpoint, so a
    partial answer set never fails. Unknown question ids or out-of-scale values
    raise InvalidAnswerError.
    """
    accumulators: Dict[ChakraKey, List[int]] = {key: [] for key in CHAKRA_KEYS}
    scales: Dict[ChakraKey, AnswerScale] = {}

    for question_id, raw_value in answers.items():
        question = bank.get(question_id)
        if question is None:
            raise InvalidAnswerError(f"Unknown question ID: {question_id}", question_id=question_id)

        signal = answer_signal(question, validate_answer(question, raw_value))

        for key in question.target_keys():
            seen: Optional[AnswerScale] = scales.setdefault(key, question.answer_scale)
            if seen is not question.answer_scale:
                raise InconsistentScaleError(
                    f"Chakra '{key.value}' received both {seen.value} and {question.answer_scale.value} answers"
                )
            accumulators[key].append(signal)

    intensities = {}
    for key in CHAKRA_KEYS:
        values = accumulators[key]
        if not values:
            intensities[key] = NEUTRAL_INTENSITY
            continue
        intensities[key] = normalize_intensity(sum(values) / len(values), scales[key])

    logger.debug(f"Scored {len(answers)} answers from {bank.mode.value} bank: {intensities}")
    return ChakraProfile.from_mapping(intensities)
