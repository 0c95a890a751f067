"""
Result models

Defines the structure of a completed assessment's result.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from pydantic import BaseModel, Field


class CompetencyLevel(str, Enum):
    """Qualitative level assigned to a domain average."""

    EXPERT = "Expert"          # >= 4.5
    PROFICIENT = "Proficient"  # >= 3.5
    DEVELOPING = "Developing"  # >= 2.5
    EMERGING = "Emerging"      # >= 1.5
    BEGINNING = "Beginning"    # below 1.5

    @property
    def threshold(self) -> float:
        """Lowest average that reaches this level."""
        thresholds = {
            "Expert": 4.5,
            "Proficient": 3.5,
            "Developing": 2.5,
            "Emerging": 1.5,
            "Beginning": 0.0,
        }
        return thresholds[self.value]

    @classmethod
    def from_score(cls, score: float) -> "CompetencyLevel":
        """Map an average rating to its level."""
        if score >= 4.5:
            return cls.EXPERT
        elif score >= 3.5:
            return cls.PROFICIENT
        elif score >= 2.5:
            return cls.DEVELOPING
        elif score >= 1.5:
            return cls.EMERGING
        else:
            return cls.BEGINNING


def display_score(score: float) -> float:
    """Round a score to one decimal for display, halves rounded up."""
    return float(Decimal(str(score)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class RecommendationPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DomainScore(BaseModel):
    """Average rating of one domain with its level."""

    domain: str
    score: float = Field(..., description="Unrounded average rating")
    level: CompetencyLevel
    response_count: int = Field(default=0, ge=0)


class Recommendation(BaseModel):
    """A development recommendation."""

    title: str
    description: str
    priority: RecommendationPriority


class AssessmentResult(BaseModel):
    """Result of a completed assessment. Immutable once created."""

    model_config = {"frozen": True}

    id: str
    assessment_type: str
    job_title: str
    completed_at: date
    overall_score: float
    domain_scores: list[DomainScore] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    development_areas: list[str] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)


class ResultSummary(BaseModel):
    """Condensed result for quick view."""

    result_id: str
    overall_score: float
    overall_level: CompetencyLevel
    top_domain: str
    top_development_area: str
    recommendation_count: int


# ============================================================================
# DEMO HISTORY
# ============================================================================

DEMO_COMPLETED_RESULTS: list[AssessmentResult] = [
    AssessmentResult(
        id="result-1",
        assessment_type="ACI Annual Competency Assessment",
        job_title="Classroom Teacher",
        completed_at=date(2024, 12, 1),
        overall_score=3.8,
        domain_scores=[
            DomainScore(domain="Teaching & Learning", score=4.2, level=CompetencyLevel.PROFICIENT),
            DomainScore(domain="Student Support & Wellbeing", score=3.9, level=CompetencyLevel.PROFICIENT),
            DomainScore(domain="Professional Growth & Leadership", score=3.5, level=CompetencyLevel.PROFICIENT),
            DomainScore(domain="Technology & Innovation", score=3.6, level=CompetencyLevel.PROFICIENT),
        ],
        strengths=[
            "Strong lesson planning and curriculum design skills",
            "Effective instructional delivery with varied methodologies",
            "Excellent student rapport and classroom management",
        ],
        development_areas=[
            "Technology integration in instruction",
            "Data-driven decision making",
            "Leadership and mentoring skills",
        ],
        recommendations=[
            Recommendation(
                title="Complete Digital Learning Certificate",
                description="Enroll in the EdTech Integration certification program to enhance technology skills",
                priority=RecommendationPriority.HIGH,
            ),
            Recommendation(
                title="Join Professional Learning Community",
                description="Participate in the school's data analysis PLC to improve data-driven practices",
                priority=RecommendationPriority.MEDIUM,
            ),
            Recommendation(
                title="Mentor a New Teacher",
                description="Take on a mentoring role to develop leadership competencies",
                priority=RecommendationPriority.LOW,
            ),
        ],
    ),
]
