import logging
from functools import lru_cache
from typing import Any, Dict, List, Union

import yaml
from pydantic import ValidationError

from services.assessment_engine.definitions import CATALOGUES
from services.assessment_engine.models import (
    AnswerScale,
    AssessmentMode,
    AssessmentStep,
    CatalogueValidationError,
    ChakraKey,
    InconsistentScaleError,
    Question,
    QuestionBank,
)

logger = logging.getLogger(__name__)


def validate_catalogue(bank: QuestionBank) -> None:
    """
    Catalogue self-check, run once when a bank is built.
    Rejects duplicate step or question ids, empty steps, categorical option
    values outside the scale, and chakras whose questions mix answer scales.
    """
    if not bank.steps:
        raise CatalogueValidationError(f"Catalogue '{bank.mode.value}' has no steps")

    step_ids = set()
    question_ids = set()
    scale_by_chakra: Dict[ChakraKey, AnswerScale] = {}

    for step in bank.steps:
        if step.id in step_ids:
            raise CatalogueValidationError(f"Duplicate step ID found: {step.id}")
        step_ids.add(step.id)
        if not step.questions:
            raise CatalogueValidationError(f"Step '{step.id}' has no questions")

        for question in step.questions:
            if question.id in question_ids:
                raise CatalogueValidationError(f"Duplicate question ID '{question.id}' in step '{step.id}'")
            question_ids.add(question.id)

            for option in question.options:
                if not 1 <= option.value <= question.answer_scale.max_value:
                    raise CatalogueValidationError(
                        f"Option value {option.value} of question '{question.id}' is outside "
                        f"1-{question.answer_scale.max_value}"
                    )

            for key in question.target_keys():
                seen = scale_by_chakra.setdefault(key, question.answer_scale)
                if seen is not question.answer_scale:
                    raise InconsistentScaleError(
                        f"Chakra '{key.value}' mixes {seen.value} and {question.answer_scale.value} "
                        f"questions (question '{question.id}')"
                    )


def build_question_bank(data: Dict[str, Any]) -> QuestionBank:
    """
    Validates raw catalogue data against the QuestionBank model
    and runs the catalogue self-check.
    """
    try:
        bank = QuestionBank.model_validate(data)
    except ValidationError as e:
        raise CatalogueValidationError(f"Malformed question catalogue: {e}") from e
    validate_catalogue(bank)
    return bank


def load_question_bank_from_file(file_path: str) -> QuestionBank:
    """
    Loads a question catalogue from a YAML file, validates it,
    and returns a QuestionBank.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogueValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise CatalogueValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise CatalogueValidationError(f"YAML file is empty or invalid: {file_path}")

    return build_question_bank(data)


@lru_cache(maxsize=None)
def get_question_bank(mode: Union[AssessmentMode, str]) -> QuestionBank:
    """Built-in catalogue for a mode, validated once and cached."""
    mode = AssessmentMode(mode)
    bank = build_question_bank(CATALOGUES[mode.value]())
    logger.info(f"Loaded {mode.value} question bank v{bank.version} with {len(bank)} questions")
    return bank


def questions_for(mode: Union[AssessmentMode, str]) -> List[Question]:
    return get_question_bank(mode).questions


def steps_for(mode: Union[AssessmentMode, str]) -> List[AssessmentStep]:
    return list(get_question_bank(mode).steps)
