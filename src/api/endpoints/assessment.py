"""
Assessment API endpoints

Handles the assessment session lifecycle:
- Creating sessions
- Generating questions
- Recording ratings and navigating questions
- Completing or abandoning assessments
"""

from typing import Any, Literal, NoReturn

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from src.models.assessment import AssessmentSetup
from src.models.framework import MIN_RATING, MAX_RATING
from src.core.assessment_orchestrator import (
    AssessmentError,
    AssessmentOrchestrator,
    SessionNotFoundError,
)
from src.api.dependencies import get_orchestrator
from src.api.endpoints.results import ResultResponse, to_result_response

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class SetupRequest(BaseModel):
    """Request model for assessment setup."""
    job_role_id: str = ""
    assessment_id: str | None = None
    custom_context: str = ""


class SetupResponse(BaseModel):
    """Response model for assessment setup."""
    session_id: str
    status: str
    job_title: str
    assessment_type: str
    message: str


class StartResponse(BaseModel):
    """Response after generating the question set."""
    session_id: str
    state: str
    total_questions: int
    questions: list[dict[str, Any]]
    current_question: dict[str, Any] | None = None
    message: str


class RespondRequest(BaseModel):
    """Request model for rating a question."""
    question_id: str
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, strict=True)
    notes: str | None = None


class NavigateRequest(BaseModel):
    direction: Literal["next", "previous"]


class ProgressResponse(BaseModel):
    """Response for session status and progress."""
    session_id: str
    state: str
    answered: int
    total_questions: int
    progress_percentage: float
    current_question_index: int
    duration_seconds: float = 0.0


class CurrentQuestionResponse(BaseModel):
    question_number: int
    total_questions: int
    question: dict[str, Any] | None = None
    rating: int | None = None
    is_first: bool
    is_last: bool


def _raise_for(error: AssessmentError) -> NoReturn:
    """Translate assessment errors to HTTP errors."""
    if isinstance(error, SessionNotFoundError):
        raise HTTPException(status_code=404, detail="Session not found")
    raise HTTPException(status_code=400, detail=str(error))


# ============================================================================
# REST ENDPOINTS
# ============================================================================

@router.post("/setup", response_model=SetupResponse)
async def setup_assessment(
    request: SetupRequest,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> SetupResponse:
    """
    Create a new assessment session.

    Questions are not generated until /start is called.
    """
    try:
        session = await orchestrator.create_session(AssessmentSetup(
            job_role_id=request.job_role_id,
            assessment_id=request.assessment_id,
            custom_context=request.custom_context,
        ))
    except AssessmentError as e:
        _raise_for(e)

    return SetupResponse(
        session_id=session.session_id,
        status="created",
        job_title=session.job_title,
        assessment_type=session.assessment_type,
        message="Assessment session created. Call /start to generate questions.",
    )


@router.post("/{session_id}/start", response_model=StartResponse)
async def start_assessment(
    session_id: str,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> StartResponse:
    """Generate the question set and enter the in-progress state."""
    try:
        result = await orchestrator.start_assessment(session_id)
    except AssessmentError as e:
        _raise_for(e)

    return StartResponse(**result)


@router.get("/{session_id}/questions/current", response_model=CurrentQuestionResponse)
async def get_current_question(
    session_id: str,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> CurrentQuestionResponse:
    """Get the current question and the rating already given to it."""
    try:
        return CurrentQuestionResponse(**orchestrator.get_current_question(session_id))
    except AssessmentError as e:
        _raise_for(e)


@router.post("/{session_id}/navigate", response_model=CurrentQuestionResponse)
async def navigate(
    session_id: str,
    request: NavigateRequest,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> CurrentQuestionResponse:
    """Move to the next or previous question."""
    try:
        return CurrentQuestionResponse(**await orchestrator.navigate(session_id, request.direction))
    except AssessmentError as e:
        _raise_for(e)


@router.post("/{session_id}/respond", response_model=ProgressResponse)
async def submit_response(
    session_id: str,
    request: RespondRequest,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> ProgressResponse:
    """
    Rate a question.

    Rating the same question again replaces the earlier rating.
    """
    try:
        progress = await orchestrator.record_response(
            session_id=session_id,
            question_id=request.question_id,
            rating=request.rating,
            notes=request.notes,
        )
    except AssessmentError as e:
        _raise_for(e)

    return ProgressResponse(**progress)


@router.get("/{session_id}/status", response_model=ProgressResponse)
async def get_session_status(
    session_id: str,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> ProgressResponse:
    """Get the current state and progress of a session."""
    try:
        return ProgressResponse(**orchestrator.get_progress(session_id))
    except AssessmentError as e:
        _raise_for(e)


@router.post("/{session_id}/complete", response_model=ResultResponse)
async def complete_assessment(
    session_id: str,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> ResultResponse:
    """
    Complete the assessment.

    Scores are computed once and frozen; the session cannot be resumed.
    """
    try:
        result = await orchestrator.complete_assessment(session_id)
    except AssessmentError as e:
        _raise_for(e)

    return to_result_response(result)


@router.post("/{session_id}/abandon")
async def abandon_assessment(
    session_id: str,
    orchestrator: AssessmentOrchestrator = Depends(get_orchestrator),
) -> dict[str, Any]:
    """Abandon the assessment and discard its responses."""
    try:
        return await orchestrator.abandon_assessment(session_id)
    except AssessmentError as e:
        _raise_for(e)
