"""
Result API endpoints

Handles:
- Full result retrieval
- Condensed result summary
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.models.result import AssessmentResult, display_score
from src.core.assessment_orchestrator import (
    AssessmentOrchestrator,
    SessionNotFoundError,
    StateTransitionError,
)
from src.api.dependencies import get_orchestrator

router = APIRouter()


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class DomainScoreResponse(BaseModel):
    domain: str
    score: float
    level: str


class RecommendationResponse(BaseModel):
    title: str
    description: str
    priority: str


class ResultResponse(BaseModel):
    """Full result response; scores rounded to one decimal."""
    id: str
    assessment_type: str
    job_title: str
    completed_at: str
    overall_score: float
    domain_scores: list[DomainScoreResponse]
    strengths: list[str]
    development_areas: list[str]
    recommendations: list[RecommendationResponse]


class ResultSummaryResponse(BaseModel):
    """Condensed result response."""
    result_id: str
    overall_score: float
    overall_level: str
    top_domain: str
    top_development_area: str
    recommendation_count: int


def to_result_response(result: AssessmentResult) -> ResultResponse:
    """Format a result for display."""
    return ResultResponse(
        id=result.id,
        assessment_type=result.assessment_type,
        job_title=result.job_title,
        completed_at=result.completed_at.isoformat(),
        overall_score=display_score(result.overall_score),
        domain_scores=[
            DomainScoreResponse(
                domain=d.domain,
                score=display_score(d.score),
                level=d.level.value,
            )
            for d in result.domain_scores
        ],
        strengths=list(result.strengths),
        development_areas=list(result.development_areas),
        recommendations=[
            RecommendationResponse(
                title=r.title,
                description=r.description,
                priority=r.priority.value,
            )
            for r in result.recommendations
        ],
    )


def _load_result(orchestrator: AssessmentOrchestrator, session_id: str) -> AssessmentResult:
    try:
        return orchestrator.get_result(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except StateTransitionError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get("/{session_id}", response_model=ResultResponse)
async def get_result(
    session_id: str,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> ResultResponse:
    """
    Get the full assessment result.

    Available once the assessment is completed.
    """
    return to_result_response(_load_result(orchestrator, session_id))


@router.get("/{session_id}/summary", response_model=ResultSummaryResponse)
async def get_result_summary(
    session_id: str,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> ResultSummaryResponse:
    """Get a condensed result summary."""
    result = _load_result(orchestrator, session_id)
    summary = orchestrator.result_generator.generate_summary(result)

    return ResultSummaryResponse(
        result_id=summary.result_id,
        overall_score=summary.overall_score,
        overall_level=summary.overall_level.value,
        top_domain=summary.top_domain,
        top_development_area=summary.top_development_area,
        recommendation_count=summary.recommendation_count,
    )
