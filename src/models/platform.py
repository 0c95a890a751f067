"""
Platform API models

Typed inputs and outputs for the procedures consumed from the main
product's RPC API. Field names are snake_case in Python and camelCase on
the wire.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PlatformModel(BaseModel):
    """Base for wire models: camelCase aliases, unknown fields kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize for the RPC API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SuccessOutput(PlatformModel):
    success: bool = True


# ============================================================================
# NOTIFICATIONS
# ============================================================================

class Notification(PlatformModel):
    """An in-app notification."""

    id: int
    title: str = ""
    message: str = ""
    type: str = "info"  # "info", "success", "warning", "error"
    is_read: bool = False
    created_at: datetime | None = None


class MarkNotificationReadInput(PlatformModel):
    id: int


# ============================================================================
# SIGNUP
# ============================================================================

class SignupInput(PlatformModel):
    """Self-service organisation signup payload."""

    organization_name: str = Field(..., min_length=2, max_length=200)
    email: str
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str | None = None
    emirate: str | None = None
    password: str = Field(..., min_length=8)
    agree_to_marketing: bool = False


class SignupOutput(PlatformModel):
    success: bool = True
    tenant_id: int | None = None
    user_id: int | None = None


# ============================================================================
# PSYCHOMETRIC QUESTION BANK
# ============================================================================

class PsychometricTestType(str, Enum):
    """Test types accepted by the psychometric procedures."""

    PERSONALITY = "personality"
    EQ = "eq"
    TEACHING_STYLE = "teaching-style"
    LEADERSHIP = "leadership"
    COGNITIVE = "cognitive"
    BIG5 = "big5"
    EMOTIONAL_INTELLIGENCE = "emotional_intelligence"


class PsychometricQuestionQuery(PlatformModel):
    test_type: PsychometricTestType
    count: int = Field(default=10, ge=1, le=100)


class GeneratePsychometricQuestionsInput(PlatformModel):
    test_type: PsychometricTestType
    dimension: str
    count: int = Field(default=10, ge=5, le=50)


class PsychometricQuestion(PlatformModel):
    """A question-bank item; AI output may use "text" instead of "question"."""

    id: int | None = None
    question: str = Field(
        default="",
        validation_alias=AliasChoices("question", "text"),
    )
    dimension: str | None = None
    test_type: str | None = None
    reverse_scored: bool = False


class MarkQuestionsUsedInput(PlatformModel):
    question_ids: list[int] = Field(..., min_length=1)
    assessment_id: int


# ============================================================================
# PERFORMANCE CYCLES
# ============================================================================

class PerformanceCycle(PlatformModel):
    id: int | None = None
    name: str
    start_date: date | None = None
    end_date: date | None = None
    description: str | None = None
    cycle_type: str | None = None
    status: str | None = None


class CreatePerformanceCycleInput(PlatformModel):
    """Performance cycle creation form."""

    name: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    description: str = ""
    cycle_type: str = "annual"
    rating_scale: str = "5-point"
    selected_competencies: list[str] = Field(
        default_factory=lambda: [
            "teaching",
            "curriculum",
            "student-engagement",
            "assessment",
            "professionalism",
        ]
    )
    include_self_assessment: bool = True
    include_manager_review: bool = True
    include360_feedback: bool = False
    include_calibration: bool = True
    self_assessment_days: int = 14
    manager_review_days: int = 14
    reminder_frequency: str = "weekly"
    escalation_days: int = 3


# ============================================================================
# EXAM REVIEW
# ============================================================================

class ExamReviewInput(PlatformModel):
    attempt_id: int


class ExamAttemptSummary(PlatformModel):
    id: int
    exam_title: str = ""
    started_at: datetime | None = None
    completed_at: datetime | None = None
    total_questions: int = 0
    total_points: float | None = None
    passing_score: float | None = None
    score: float | None = None
    score_percentage: float | None = None
    passed: bool | None = None


class BreakdownEntry(PlatformModel):
    """Correct/total for one difficulty level or topic."""

    level: str | None = None
    topic: str | None = None
    total: int
    correct: int
    percentage: float


class ExamAnalytics(PlatformModel):
    total_questions: int
    correct_answers: int
    incorrect_answers: int
    score_percentage: float
    passed: bool
    by_difficulty: list[BreakdownEntry] = Field(default_factory=list)
    by_topic: list[BreakdownEntry] = Field(default_factory=list)


class ExamReview(PlatformModel):
    attempt: ExamAttemptSummary
    answers: list[dict[str, Any]] = Field(default_factory=list)
    analytics: ExamAnalytics
