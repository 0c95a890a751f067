"""
Metadata API endpoints

Provides reference data for:
- The competency framework
- Job roles
- Rating scale and levels
- Available assessments and past results
"""

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from src.models.framework import (
    ACI_FRAMEWORK,
    JOB_ROLES,
    RATING_SCALE,
    CompetencyDomain,
    count_indicators,
)
from src.models.assessment import DEMO_AVAILABLE_ASSESSMENTS, AvailableAssessment
from src.models.result import DEMO_COMPLETED_RESULTS, CompetencyLevel
from src.api.endpoints.results import ResultResponse, to_result_response

router = APIRouter()


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class JobRoleInfo(BaseModel):
    """Information about a job role."""
    id: str
    title: str
    description: str


class FrameworkInfo(BaseModel):
    """The competency framework with its size."""
    name: str
    domain_count: int
    competency_count: int
    indicator_count: int
    domains: list[CompetencyDomain]


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get("/framework", response_model=FrameworkInfo)
async def get_framework() -> FrameworkInfo:
    """Get the competency framework questions are generated from."""
    return FrameworkInfo(
        name="ACI Educator Framework",
        domain_count=len(ACI_FRAMEWORK),
        competency_count=sum(len(d.competencies) for d in ACI_FRAMEWORK),
        indicator_count=count_indicators(ACI_FRAMEWORK),
        domains=ACI_FRAMEWORK,
    )


@router.get("/framework/domains/{domain_id}", response_model=CompetencyDomain)
async def get_domain(domain_id: str) -> CompetencyDomain:
    """Get a single competency domain."""
    for domain in ACI_FRAMEWORK:
        if domain.id == domain_id:
            return domain
    raise HTTPException(status_code=404, detail=f"Unknown domain: {domain_id}")


@router.get("/job-roles")
async def get_job_roles() -> list[JobRoleInfo]:
    """Get all job roles an assessment can be taken for."""
    return [
        JobRoleInfo(id=role.id, title=role.title, description=role.description)
        for role in JOB_ROLES.values()
    ]


@router.get("/rating-scale")
async def get_rating_scale() -> list[dict[str, Any]]:
    """Get the 1-5 rating scale labels."""
    return [label.model_dump() for label in RATING_SCALE.values()]


@router.get("/levels")
async def get_levels() -> list[dict[str, Any]]:
    """Get the qualitative levels with their lowest qualifying average."""
    return [
        {"level": level.value, "min_score": level.threshold}
        for level in CompetencyLevel
    ]


@router.get("/assessments")
async def get_available_assessments() -> list[AvailableAssessment]:
    """Get the assessments offered to the user."""
    return DEMO_AVAILABLE_ASSESSMENTS


@router.get("/results/history")
async def get_result_history() -> list[ResultResponse]:
    """Get previously completed results."""
    return [to_result_response(result) for result in DEMO_COMPLETED_RESULTS]
