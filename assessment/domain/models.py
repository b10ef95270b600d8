"""
Domain models for the daily self-assessment.

These models represent the core business concepts and are framework-agnostic.
They use Pydantic for validation and for the persisted record layout.
"""

from datetime import date
from enum import Enum

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    model_validator,
)


class QuestionKind(str, Enum):
    """How a question is answered in the UI."""

    SLIDER = "slider"
    BINARY_CHOICE = "binary_choice"
    MULTI_CHOICE = "multi_choice"


class Tier(str, Enum):
    """Care recommendation tiers. Values are the persisted recommendation labels."""

    HIGH_NEED = "1:1 Therapy Session (High Need)"
    MODERATE_NEED = "Group Session (Moderate Need)"
    LOW_NEED = "Self-Care Focus (Low Need)"


class ColorBucket(str, Enum):
    """Display color for a score on the progress chart."""

    LOW = "low"  # red
    MID = "mid"  # yellow
    HIGH = "high"  # green


class CarePathway(str, Enum):
    """Next step offered to the user for a tier."""

    ONE_TO_ONE_CHAT = "one_to_one_chat"
    GROUP_SESSIONS = "group_sessions"
    SELF_CARE = "self_care"


class AnswerOption(BaseModel):
    """A selectable option of a choice question."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(min_length=1, max_length=1, description="Option letter, e.g. 'A'")
    label: str
    score: int = Field(ge=0)


class Question(BaseModel):
    """A single question of the catalog and its valid answer domain."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    prompt: str = Field(min_length=1)
    kind: QuestionKind

    # Slider domain
    min_value: int | None = None
    max_value: int | None = None
    scale_labels: tuple[str, str] | None = Field(
        None, description="Labels shown at the low and high ends of a slider"
    )

    # Choice domain
    options: tuple[AnswerOption, ...] = ()

    @model_validator(mode="after")
    def check_domain(self) -> "Question":
        if self.kind == QuestionKind.SLIDER:
            if self.min_value is None or self.max_value is None:
                raise ValueError(f"slider question {self.id} needs min_value and max_value")
            if self.min_value > self.max_value:
                raise ValueError(f"slider question {self.id} has min_value > max_value")
            if self.options:
                raise ValueError(f"slider question {self.id} cannot define options")
            return self

        if self.min_value is not None or self.max_value is not None:
            raise ValueError(f"choice question {self.id} cannot define a slider range")
        if not self.options:
            raise ValueError(f"choice question {self.id} needs at least one option")
        if self.kind == QuestionKind.BINARY_CHOICE and len(self.options) != 2:
            raise ValueError(f"binary question {self.id} needs exactly two options")
        letters = [option.value for option in self.options]
        if len(set(letters)) != len(letters):
            raise ValueError(f"question {self.id} has duplicate option letters")
        return self

    @property
    def min_score(self) -> int:
        if self.kind == QuestionKind.SLIDER:
            return self.min_value  # type: ignore[return-value]
        return min(option.score for option in self.options)

    @property
    def max_score(self) -> int:
        if self.kind == QuestionKind.SLIDER:
            return self.max_value  # type: ignore[return-value]
        return max(option.score for option in self.options)

    def accepts(self, score: int) -> bool:
        """Check whether a score lies within this question's domain."""
        if self.kind == QuestionKind.SLIDER:
            return self.min_score <= score <= self.max_score
        return any(option.score == score for option in self.options)


class Submission(BaseModel):
    """
    One scored self-assessment, keyed by calendar day.

    Serialized with aliases as the persisted history record:
    ``{"day", "rawScore", "normalizedScore", "recommendation"}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Older records used "date" for the day key
    day: date = Field(validation_alias=AliasChoices("day", "date"), serialization_alias="day")
    raw_score: int = Field(alias="rawScore")
    normalized_score: float = Field(alias="normalizedScore", ge=0.0, le=10.0)
    tier: Tier = Field(alias="recommendation")

    def to_record(self) -> dict:
        """Return the JSON-ready record stored by the history store."""
        return self.model_dump(mode="json", by_alias=True)


class ProgressPoint(BaseModel):
    """A ledger entry prepared for the trend chart."""

    model_config = ConfigDict(frozen=True)

    submission: Submission
    color: ColorBucket

    @computed_field(return_type=str)
    def day_label(self) -> str:
        """Short MM-DD label for the chart axis."""
        return self.submission.day.strftime("%m-%d")
