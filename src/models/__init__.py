"""
Data models and schemas for CompetencyCheck

Contains Pydantic models for:
- Competency framework and job roles
- Assessment sessions, questions and responses
- Assessment results
- Platform API inputs and outputs
"""

from src.models.framework import (
    Competency,
    CompetencyDomain,
    JobRole,
    RatingLabel,
    ACI_FRAMEWORK,
    JOB_ROLES,
    RATING_SCALE,
)
from src.models.result import (
    AssessmentResult,
    CompetencyLevel,
    DomainScore,
    Recommendation,
    RecommendationPriority,
    ResultSummary,
)
from src.models.assessment import (
    AssessmentQuestion,
    AssessmentResponse,
    AssessmentSession,
    AssessmentSetup,
    AssessmentState,
    AvailableAssessment,
    ResponseStore,
)

__all__ = [
    # Framework
    "Competency",
    "CompetencyDomain",
    "JobRole",
    "RatingLabel",
    "ACI_FRAMEWORK",
    "JOB_ROLES",
    "RATING_SCALE",
    # Result
    "AssessmentResult",
    "CompetencyLevel",
    "DomainScore",
    "Recommendation",
    "RecommendationPriority",
    "ResultSummary",
    # Assessment
    "AssessmentQuestion",
    "AssessmentResponse",
    "AssessmentSession",
    "AssessmentSetup",
    "AssessmentState",
    "AvailableAssessment",
    "ResponseStore",
]
