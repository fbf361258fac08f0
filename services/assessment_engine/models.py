from enum import Enum
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from pydantic.alias_generators import to_camel


class ChakraKey(str, Enum):
    ROOT = "root"
    SACRAL = "sacral"
    SOLAR_PLEXUS = "solarPlexus"
    HEART = "heart"
    THROAT = "throat"
    THIRD_EYE = "thirdEye"
    CROWN = "crown"


# Canonical order, root to crown
CHAKRA_KEYS: List[ChakraKey] = list(ChakraKey)

ALL_CHAKRAS = "all"
ChakraTarget = Union[ChakraKey, Literal["all"]]

NEUTRAL_INTENSITY = 5.0
MIN_INTENSITY = 1.0
MAX_INTENSITY = 10.0


class AnswerScale(str, Enum):
    """How a raw answer is encoded: a 1-10 slider or one of five labelled options."""
    LINEAR_TEN = "linear_ten"
    CATEGORICAL_FIVE = "categorical_five"

    @property
    def max_value(self) -> int:
        return 10 if self is AnswerScale.LINEAR_TEN else 5

    @property
    def output_factor(self) -> float:
        # Multiplier that maps the scale's average onto the common 1-10 range
        return 1.0 if self is AnswerScale.LINEAR_TEN else 2.0


class AssessmentMode(str, Enum):
    BASIC = "basic"
    ENHANCED = "enhanced"


class QuestionCategory(str, Enum):
    MIND = "mind"
    EMOTIONAL = "emotional"
    PHYSICAL = "physical"
    SITUATIONAL = "situational"
    REFLECTION = "reflection"


class AnswerOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int
    label: str
    description: Optional[str] = None


class Question(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    text: str
    chakra: ChakraTarget
    answer_scale: AnswerScale
    inverse_scoring: bool = False
    category: Optional[QuestionCategory] = None
    options: List[AnswerOption] = Field(default_factory=list)

    @property
    def targets_all(self) -> bool:
        return self.chakra == ALL_CHAKRAS

    def target_keys(self) -> List[ChakraKey]:
        return list(CHAKRA_KEYS) if self.targets_all else [ChakraKey(self.chakra)]


class AssessmentStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    questions: List[Question]


class QuestionBank(BaseModel):
    """A versioned, ordered catalogue of questions for one assessment mode."""
    version: str
    mode: AssessmentMode
    steps: List[AssessmentStep]

    _lookup: Dict[str, Question] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        self._lookup = {q.id: q for step in self.steps for q in step.questions}

    @property
    def questions(self) -> List[Question]:
        return [q for step in self.steps for q in step.questions]

    def get(self, question_id: str) -> Optional[Question]:
        return self._lookup.get(question_id)

    def __len__(self) -> int:
        return len(self._lookup)


class ChakraProfile(BaseModel):
    """Seven chakra intensities on the 1-10 scale. Immutable once computed."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    root: float = Field(NEUTRAL_INTENSITY, ge=MIN_INTENSITY, le=MAX_INTENSITY)
    sacral: float = Field(NEUTRAL_INTENSITY, ge=MIN_INTENSITY, le=MAX_INTENSITY)
    solar_plexus: float = Field(NEUTRAL_INTENSITY, ge=MIN_INTENSITY, le=MAX_INTENSITY)
    heart: float = Field(NEUTRAL_INTENSITY, ge=MIN_INTENSITY, le=MAX_INTENSITY)
    throat: float = Field(NEUTRAL_INTENSITY, ge=MIN_INTENSITY, le=MAX_INTENSITY)
    third_eye: float = Field(NEUTRAL_INTENSITY, ge=MIN_INTENSITY, le=MAX_INTENSITY)
    crown: float = Field(NEUTRAL_INTENSITY, ge=MIN_INTENSITY, le=MAX_INTENSITY)

    @classmethod
    def from_mapping(cls, values: Dict[Union[ChakraKey, str], float]) -> "ChakraProfile":
        return cls.model_validate({ChakraKey(k).value: v for k, v in values.items()})

    @classmethod
    def neutral(cls) -> "ChakraProfile":
        return cls()

    def get(self, key: Union[ChakraKey, str]) -> float:
        return self.as_dict()[ChakraKey(key).value]

    def as_dict(self) -> Dict[str, float]:
        """Mapping keyed by the canonical chakra names, root to crown."""
        return self.model_dump(by_alias=True)


# Custom Error Classes
class AssessmentError(ValueError):
    """Base class for assessment scoring and navigation errors."""
    pass


class InvalidAnswerError(AssessmentError):
    """Raised for an unknown question id or a value outside the question's scale."""

    def __init__(self, message: str, question_id: Optional[str] = None):
        super().__init__(message)
        self.question_id = question_id


class InconsistentScaleError(AssessmentError):
    """Raised when questions sharing one chakra use different answer scales."""
    pass


class CatalogueValidationError(AssessmentError):
    """Raised when a question catalogue is malformed (duplicate ids, empty steps)."""
    pass


class SessionCompleteError(AssessmentError):
    """Raised when navigating or answering an assessment that has already finished."""
    pass
