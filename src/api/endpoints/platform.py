"""
Platform API endpoints

Thin gateway over the product's RPC API:
- Notifications
- Self-service signup
- Psychometric question bank
- Performance cycles
- Exam review analytics

Platform failures are returned as 502 with a user-facing message.
"""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from src.models.platform import (
    CreatePerformanceCycleInput,
    ExamReview,
    ExamReviewInput,
    GeneratePsychometricQuestionsInput,
    MarkNotificationReadInput,
    MarkQuestionsUsedInput,
    Notification,
    PerformanceCycle,
    PsychometricQuestion,
    PsychometricQuestionQuery,
    PsychometricTestType,
    SignupOutput,
    SuccessOutput,
)
from src.core.platform_client import PlatformAPIError, PlatformClient, user_facing_message
from src.core.signup import SignupForm, to_signup_input, validate_signup_form
from src.api.dependencies import get_platform_client

router = APIRouter()


def _raise_platform_error(error: PlatformAPIError) -> NoReturn:
    raise HTTPException(status_code=502, detail=user_facing_message(error.message))


# ============================================================================
# NOTIFICATIONS
# ============================================================================

@router.get("/notifications/unread")
async def get_unread_notifications(
    client: PlatformClient = Depends(get_platform_client),
) -> list[Notification]:
    """Get the user's unread notifications."""
    try:
        return await client.get_unread_notifications()
    except PlatformAPIError as e:
        _raise_platform_error(e)


@router.post("/notifications/{notification_id}/read")
async def mark_notification_read(
    notification_id: int,
    client: PlatformClient = Depends(get_platform_client),
) -> SuccessOutput:
    """Mark a notification as read."""
    try:
        return await client.mark_notification_read(MarkNotificationReadInput(id=notification_id))
    except PlatformAPIError as e:
        _raise_platform_error(e)


# ============================================================================
# SIGNUP
# ============================================================================

@router.post("/signup")
async def signup(
    form: SignupForm,
    client: PlatformClient = Depends(get_platform_client),
) -> SignupOutput:
    """
    Create an organisation account.

    The form is validated locally before anything is sent.
    """
    error = validate_signup_form(form)
    if error:
        raise HTTPException(status_code=400, detail=error)

    try:
        payload = to_signup_input(form)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors()[0]["msg"])

    try:
        return await client.self_signup(payload)
    except PlatformAPIError as e:
        _raise_platform_error(e)


# ============================================================================
# PSYCHOMETRIC QUESTION BANK
# ============================================================================

@router.get("/psychometric/questions")
async def get_psychometric_questions(
    test_type: PsychometricTestType = Query(PsychometricTestType.PERSONALITY),
    count: int = Query(10, ge=1, le=100),
    client: PlatformClient = Depends(get_platform_client),
) -> list[PsychometricQuestion]:
    """Fetch questions from the psychometric question bank."""
    try:
        return await client.get_psychometric_questions(
            PsychometricQuestionQuery(test_type=test_type, count=count)
        )
    except PlatformAPIError as e:
        _raise_platform_error(e)


@router.post("/psychometric/questions/generate")
async def generate_psychometric_questions(
    request: GeneratePsychometricQuestionsInput,
    client: PlatformClient = Depends(get_platform_client),
) -> list[PsychometricQuestion]:
    """Generate psychometric questions with the platform's AI service."""
    try:
        return await client.generate_psychometric_questions(request)
    except PlatformAPIError as e:
        _raise_platform_error(e)


@router.post("/psychometric/questions/mark-used")
async def mark_questions_used(
    request: MarkQuestionsUsedInput,
    client: PlatformClient = Depends(get_platform_client),
) -> SuccessOutput:
    """Mark question-bank items as used by an assessment."""
    try:
        return await client.mark_questions_used(request)
    except PlatformAPIError as e:
        _raise_platform_error(e)


# ============================================================================
# PERFORMANCE CYCLES
# ============================================================================

@router.get("/performance/cycles")
async def get_performance_cycles(
    client: PlatformClient = Depends(get_platform_client),
) -> list[PerformanceCycle]:
    """Get all performance cycles."""
    try:
        return await client.get_performance_cycles()
    except PlatformAPIError as e:
        _raise_platform_error(e)


@router.post("/performance/cycles")
async def create_performance_cycle(
    request: CreatePerformanceCycleInput,
    client: PlatformClient = Depends(get_platform_client),
) -> PerformanceCycle:
    """Create a performance cycle."""
    if request.end_date < request.start_date:
        raise HTTPException(status_code=400, detail="End date must be after start date")

    try:
        return await client.create_performance_cycle(request)
    except PlatformAPIError as e:
        _raise_platform_error(e)


# ============================================================================
# EXAM REVIEW
# ============================================================================

@router.get("/exams/review/{attempt_id}")
async def get_exam_review(
    attempt_id: int,
    client: PlatformClient = Depends(get_platform_client),
) -> ExamReview:
    """Get the review and analytics of an exam attempt."""
    try:
        return await client.get_exam_review(ExamReviewInput(attempt_id=attempt_id))
    except PlatformAPIError as e:
        _raise_platform_error(e)
