"""
Assessment session and response models
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

from src.models.framework import MIN_RATING, MAX_RATING
from src.models.result import AssessmentResult


class AssessmentState(str, Enum):
    """Assessment lifecycle states."""

    NOT_STARTED = "not_started"  # Session created, questions not generated
    IN_PROGRESS = "in_progress"  # Questions generated, collecting ratings
    COMPLETED = "completed"      # Result computed and frozen
    ABANDONED = "abandoned"      # Responses discarded


class AvailabilityStatus(str, Enum):
    """Status of an assessment in the catalog."""

    AVAILABLE = "available"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AvailableAssessment(BaseModel):
    """An assessment offered to the user."""

    id: str
    title: str
    description: str
    job_title: str
    framework: str
    question_count: int
    estimated_time: str
    due_date: str | None = None
    status: AvailabilityStatus = AvailabilityStatus.AVAILABLE


class AssessmentSetup(BaseModel):
    """User's assessment configuration."""

    job_role_id: str = Field(..., description="Selected job role")
    assessment_id: str | None = Field(
        default=None,
        description="Catalog assessment being taken, if any"
    )
    custom_context: str = Field(
        default="",
        description="Free-text context about the role, subjects, grade levels"
    )


class AssessmentQuestion(BaseModel):
    """A question generated from one behavioral indicator."""

    id: str
    competency_id: str
    competency_name: str
    domain_name: str
    question: str
    behavioral_indicator: str
    ai_generated: bool = True


class AssessmentResponse(BaseModel):
    """A rating given to one question."""

    question_id: str
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, strict=True)
    notes: str | None = None


class ResponseStore(BaseModel):
    """In-memory ratings keyed by question id; last write wins."""

    entries: dict[str, AssessmentResponse] = Field(default_factory=dict)

    def set_rating(self, question_id: str, rating: int, notes: str | None = None) -> AssessmentResponse:
        """Insert or replace the rating for a question."""
        response = AssessmentResponse(question_id=question_id, rating=rating, notes=notes)
        self.entries[question_id] = response
        return response

    def get_rating(self, question_id: str) -> int | None:
        response = self.entries.get(question_id)
        return response.rating if response else None

    def responses(self) -> list[AssessmentResponse]:
        return list(self.entries.values())

    @property
    def answered_count(self) -> int:
        return len(self.entries)

    def progress_percentage(self, total: int) -> float:
        """Share of answered questions, 0-100."""
        if total <= 0:
            return 0.0
        return self.answered_count / total * 100

    def clear(self) -> None:
        self.entries.clear()


class AssessmentSession(BaseModel):
    """Complete state of one assessment instance."""

    # Identification
    session_id: str = Field(default_factory=lambda: str(uuid4()))

    # Setup
    setup: AssessmentSetup
    job_title: str
    assessment_type: str

    # State
    state: AssessmentState = Field(default=AssessmentState.NOT_STARTED)

    # Timing
    created_at: datetime = Field(default_factory=datetime.utcnow)
    started_at: datetime | None = None
    completed_at: datetime | None = None

    # Questions & Responses
    questions: list[AssessmentQuestion] = Field(default_factory=list)
    responses: ResponseStore = Field(default_factory=ResponseStore)
    current_question_index: int = 0

    # Outcome
    result: AssessmentResult | None = None

    def get_question(self, question_id: str) -> AssessmentQuestion | None:
        """Find a question of the current set by id."""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    def get_current_question(self) -> AssessmentQuestion | None:
        """Get the question at the current index."""
        if self.questions and self.current_question_index < len(self.questions):
            return self.questions[self.current_question_index]
        return None

    def move(self, step: int) -> int:
        """Move the current index by step, clamped to the question range."""
        if not self.questions:
            self.current_question_index = 0
        else:
            target = self.current_question_index + step
            self.current_question_index = max(0, min(target, len(self.questions) - 1))
        return self.current_question_index

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def progress_percentage(self) -> float:
        return self.responses.progress_percentage(self.total_questions)

    def get_duration_seconds(self) -> float:
        """Get time spent on the assessment in seconds."""
        if not self.started_at:
            return 0.0
        end = self.completed_at or datetime.utcnow()
        return (end - self.started_at).total_seconds()


# ============================================================================
# DEMO CATALOG
# ============================================================================

DEMO_AVAILABLE_ASSESSMENTS: list[AvailableAssessment] = [
    AvailableAssessment(
        id="assessment-1",
        title="ACI Annual Competency Assessment",
        description="Comprehensive annual assessment covering all ACI competency domains",
        job_title="Classroom Teacher",
        framework="ACI Educator Framework",
        question_count=32,
        estimated_time="45-60 minutes",
        due_date="2025-02-15",
    ),
    AvailableAssessment(
        id="assessment-2",
        title="Teaching & Learning Self-Assessment",
        description="Focused assessment on core instructional competencies",
        job_title="Classroom Teacher",
        framework="ACI Educator Framework",
        question_count=16,
        estimated_time="20-25 minutes",
    ),
    AvailableAssessment(
        id="assessment-3",
        title="Leadership Readiness Assessment",
        description="Assessment for teachers considering leadership roles",
        job_title="Lead Teacher",
        framework="ACI Leadership Framework",
        question_count=24,
        estimated_time="30-40 minutes",
        status=AvailabilityStatus.IN_PROGRESS,
    ),
]


def get_available_assessment(assessment_id: str) -> AvailableAssessment | None:
    for assessment in DEMO_AVAILABLE_ASSESSMENTS:
        if assessment.id == assessment_id:
            return assessment
    return None
