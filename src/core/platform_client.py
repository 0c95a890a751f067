"""
Platform API Client

Async client for the main product's remote procedure API.

Queries are sent as GET {base}/{procedure}?input={json}, mutations as
POST {base}/{procedure} with a JSON body. Responses use the envelopes
{"result": {"data": ...}} and {"error": {"message": ...}}; a nested
{"json": ...} wrapper is unwrapped when present.
"""

import json
import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from src.config.settings import get_settings
from src.models.platform import (
    CreatePerformanceCycleInput,
    ExamReview,
    ExamReviewInput,
    GeneratePsychometricQuestionsInput,
    MarkNotificationReadInput,
    MarkQuestionsUsedInput,
    Notification,
    PerformanceCycle,
    PlatformModel,
    PsychometricQuestion,
    PsychometricQuestionQuery,
    SignupInput,
    SignupOutput,
    SuccessOutput,
)

logger = logging.getLogger(__name__)


GENERIC_FAILURE_MESSAGE = (
    "Unable to create your account at this time. "
    "Please try again later or contact support."
)
_TECHNICAL_MARKERS = ("query", "SQL", "database")


class PlatformAPIError(Exception):
    """Raised when a platform procedure fails."""

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


def user_facing_message(message: str) -> str:
    """Hide raw database errors behind a generic message."""
    if any(marker in message for marker in _TECHNICAL_MARKERS):
        return GENERIC_FAILURE_MESSAGE
    return message


class PlatformClient:
    """
    Typed client for the platform's procedures.

    Each method takes a typed input model and returns a typed output,
    or raises PlatformAPIError carrying a human-readable message.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.platform_api_url).rstrip("/")

        headers = {"Content-Type": "application/json"}
        token = token if token is not None else settings.platform_api_token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout or settings.platform_api_timeout_seconds,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    # =========================================================================
    # TRANSPORT
    # =========================================================================

    async def _query(self, procedure: str, payload: PlatformModel | None = None) -> Any:
        params = {}
        if payload is not None:
            params["input"] = json.dumps(payload.to_wire())
        return await self._call("GET", procedure, params=params)

    async def _mutation(self, procedure: str, payload: PlatformModel) -> Any:
        return await self._call("POST", procedure, json_body=payload.to_wire())

    async def _call(
        self,
        method: str,
        procedure: str,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        try:
            response = await self.client.request(
                method,
                f"/{procedure}",
                params=params,
                json=json_body,
            )
        except httpx.HTTPError as e:
            logger.error(f"Platform API request failed ({procedure}): {e}")
            raise PlatformAPIError(f"Platform API unavailable: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and "error" in payload:
            raise self._to_error(procedure, payload["error"], response.status_code)

        if response.is_error:
            logger.error(f"Platform API error ({procedure}): HTTP {response.status_code}")
            raise PlatformAPIError(
                f"Platform API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if not isinstance(payload, dict) or "result" not in payload:
            raise PlatformAPIError(f"Malformed response from {procedure}")

        data = (payload["result"] or {}).get("data")
        if isinstance(data, dict) and set(data) <= {"json", "meta"} and "json" in data:
            data = data["json"]
        return data

    def _to_error(self, procedure: str, error: Any, status_code: int) -> PlatformAPIError:
        if isinstance(error, dict) and "json" in error:
            error = error["json"]
        if not isinstance(error, dict):
            error = {"message": str(error)}

        message = error.get("message") or f"{procedure} failed"
        code = (error.get("data") or {}).get("code")

        logger.warning(f"Platform procedure {procedure} failed: {message}")
        return PlatformAPIError(message, status_code=status_code, code=code)

    def _parse(self, procedure: str, data: Any, output_type: Any) -> Any:
        try:
            return TypeAdapter(output_type).validate_python(data)
        except ValidationError as e:
            logger.error(f"Unexpected output from {procedure}: {e}")
            raise PlatformAPIError(f"Unexpected response from {procedure}") from e

    # =========================================================================
    # NOTIFICATIONS
    # =========================================================================

    async def get_unread_notifications(self) -> list[Notification]:
        procedure = "notifications.getUnreadNotifications"
        data = await self._query(procedure)
        return self._parse(procedure, data or [], list[Notification])

    async def mark_notification_read(self, payload: MarkNotificationReadInput) -> SuccessOutput:
        procedure = "notifications.markAsRead"
        data = await self._mutation(procedure, payload)
        return self._parse(procedure, data or {}, SuccessOutput)

    # =========================================================================
    # SIGNUP
    # =========================================================================

    async def self_signup(self, payload: SignupInput) -> SignupOutput:
        procedure = "saas.selfSignup"
        data = await self._mutation(procedure, payload)
        return self._parse(procedure, data or {}, SignupOutput)

    # =========================================================================
    # PSYCHOMETRIC QUESTION BANK
    # =========================================================================

    async def get_psychometric_questions(
        self, payload: PsychometricQuestionQuery
    ) -> list[PsychometricQuestion]:
        procedure = "questionBank.getPsychometricQuestions"
        data = await self._query(procedure, payload)
        return self._parse(procedure, data or [], list[PsychometricQuestion])

    async def generate_psychometric_questions(
        self, payload: GeneratePsychometricQuestionsInput
    ) -> list[PsychometricQuestion]:
        procedure = "services.ai.generatePsychometricQuestions"
        data = await self._mutation(procedure, payload)
        return self._parse(procedure, data or [], list[PsychometricQuestion])

    async def mark_questions_used(self, payload: MarkQuestionsUsedInput) -> SuccessOutput:
        procedure = "questionBank.markQuestionsAsUsed"
        data = await self._mutation(procedure, payload)
        return self._parse(procedure, data or {}, SuccessOutput)

    # =========================================================================
    # PERFORMANCE CYCLES
    # =========================================================================

    async def get_performance_cycles(self) -> list[PerformanceCycle]:
        procedure = "performanceManagement.getAllCycles"
        data = await self._query(procedure)
        return self._parse(procedure, data or [], list[PerformanceCycle])

    async def create_performance_cycle(
        self, payload: CreatePerformanceCycleInput
    ) -> PerformanceCycle:
        procedure = "performanceManagement.createCycle"
        data = await self._mutation(procedure, payload)
        if isinstance(data, dict) and "name" not in data:
            # createCycle may answer with only the new id
            data = {**payload.to_wire(), **data}
        return self._parse(procedure, data, PerformanceCycle)

    # =========================================================================
    # EXAM REVIEW
    # =========================================================================

    async def get_exam_review(self, payload: ExamReviewInput) -> ExamReview:
        procedure = "questionBank.getExamReview"
        data = await self._query(procedure, payload)
        return self._parse(procedure, data, ExamReview)
