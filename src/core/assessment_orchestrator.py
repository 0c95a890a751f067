"""
Assessment Orchestrator - State machine for the assessment lifecycle.

Central coordinator of a competency self-assessment. It owns the
in-memory sessions, validates state transitions, and wires together
question generation, response collection, and result generation.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Awaitable, Callable

from src.models.assessment import (
    AssessmentSession,
    AssessmentSetup,
    AssessmentState,
    get_available_assessment,
)
from src.models.framework import get_job_role
from src.models.result import AssessmentResult
from src.core.question_builder import QuestionSetBuilder
from src.core.result_generator import ResultGenerator

logger = logging.getLogger(__name__)


class AssessmentError(Exception):
    """Raised when an assessment operation receives invalid input."""
    pass


class SessionNotFoundError(AssessmentError):
    """Raised when a session id is unknown."""
    pass


class StateTransitionError(AssessmentError):
    """Raised when an invalid state transition is attempted."""
    pass


class AssessmentOrchestrator:
    """
    Manages the assessment lifecycle using a state machine pattern.

    States:
        NOT_STARTED → IN_PROGRESS → COMPLETED
              ↓             ↓
          ABANDONED     ABANDONED

    COMPLETED and ABANDONED are terminal.
    """

    VALID_TRANSITIONS: dict[AssessmentState, list[AssessmentState]] = {
        AssessmentState.NOT_STARTED: [AssessmentState.IN_PROGRESS, AssessmentState.ABANDONED],
        AssessmentState.IN_PROGRESS: [AssessmentState.COMPLETED, AssessmentState.ABANDONED],
        AssessmentState.COMPLETED: [],  # Terminal state
        AssessmentState.ABANDONED: [],  # Terminal state
    }

    def __init__(
        self,
        question_builder: QuestionSetBuilder,
        result_generator: ResultGenerator | None = None,
        generation_delay_seconds: float = 0.0,
        default_assessment_type: str = "ACI Competency Assessment",
        default_job_title: str = "Educator",
    ):
        """
        Initialize the orchestrator with component dependencies.

        Args:
            question_builder: Builds the question set on start
            result_generator: Computes the result on completion
            generation_delay_seconds: Simulated question generation latency
            default_assessment_type: Used when no catalog assessment is chosen
            default_job_title: Used when the role has no title
        """
        self.question_builder = question_builder
        self.result_generator = result_generator or ResultGenerator()
        self.generation_delay_seconds = generation_delay_seconds
        self.default_assessment_type = default_assessment_type
        self.default_job_title = default_job_title

        # Session storage (in-memory, lost on restart)
        self._sessions: dict[str, AssessmentSession] = {}

        self._state_change_callbacks: list[
            Callable[[str, AssessmentState, AssessmentState], Awaitable[None]]
        ] = []

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    async def create_session(self, setup: AssessmentSetup) -> AssessmentSession:
        """
        Create a new assessment session.

        Raises:
            AssessmentError: If no valid job role was selected
        """
        role = get_job_role(setup.job_role_id) if setup.job_role_id else None
        if role is None:
            raise AssessmentError("Please select your job title")

        assessment_type = self.default_assessment_type
        if setup.assessment_id:
            catalog_entry = get_available_assessment(setup.assessment_id)
            if catalog_entry is None:
                raise AssessmentError(f"Unknown assessment: {setup.assessment_id}")
            assessment_type = catalog_entry.title

        session = AssessmentSession(
            setup=setup,
            job_title=role.title or self.default_job_title,
            assessment_type=assessment_type,
        )
        self._sessions[session.session_id] = session

        logger.info(f"Created assessment session: {session.session_id} ({role.title})")
        return session

    def get_session(self, session_id: str) -> AssessmentSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def require_session(self, session_id: str) -> AssessmentSession:
        session = self.get_session(session_id)
        if not session:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        return session

    # =========================================================================
    # STATE MACHINE
    # =========================================================================

    async def transition_state(
        self,
        session_id: str,
        new_state: AssessmentState,
    ) -> AssessmentSession:
        """
        Transition a session to a new state.

        Raises:
            StateTransitionError: If transition is invalid
        """
        session = self.require_session(session_id)
        old_state = session.state

        valid_next_states = self.VALID_TRANSITIONS.get(old_state, [])
        if new_state not in valid_next_states:
            raise StateTransitionError(
                f"Invalid transition from {old_state.value} to {new_state.value}. "
                f"Valid transitions: {[s.value for s in valid_next_states]}"
            )

        session.state = new_state

        if new_state == AssessmentState.IN_PROGRESS:
            session.started_at = datetime.utcnow()
        elif new_state == AssessmentState.COMPLETED:
            session.completed_at = datetime.utcnow()

        for callback in self._state_change_callbacks:
            try:
                await callback(session_id, old_state, new_state)
            except Exception as e:
                logger.error(f"State change callback error: {e}")

        logger.info(f"Session {session_id}: {old_state.value} → {new_state.value}")
        return session

    def _require_state(self, session: AssessmentSession, state: AssessmentState, action: str) -> None:
        if session.state != state:
            raise StateTransitionError(
                f"Cannot {action} in state: {session.state.value}"
            )

    # =========================================================================
    # ASSESSMENT FLOW
    # =========================================================================

    async def start_assessment(self, session_id: str) -> dict[str, Any]:
        """
        Generate the question set and begin collecting ratings.

        Returns:
            Question set and the first question
        """
        session = self.require_session(session_id)
        self._require_state(session, AssessmentState.NOT_STARTED, "start assessment")

        if self.generation_delay_seconds > 0:
            await asyncio.sleep(self.generation_delay_seconds)
            # The session may have been started or abandoned meanwhile
            self._require_state(session, AssessmentState.NOT_STARTED, "start assessment")

        session.questions = self.question_builder.build(session.job_title)
        session.responses.clear()
        session.current_question_index = 0

        await self.transition_state(session_id, AssessmentState.IN_PROGRESS)

        first = session.get_current_question()
        return {
            "session_id": session_id,
            "state": session.state.value,
            "total_questions": session.total_questions,
            "questions": [q.model_dump() for q in session.questions],
            "current_question": first.model_dump() if first else None,
            "message": f"Generated {session.total_questions} assessment questions",
        }

    async def record_response(
        self,
        session_id: str,
        question_id: str,
        rating: int,
        notes: str | None = None,
    ) -> dict[str, Any]:
        """
        Record or replace the rating for a question.

        Raises:
            StateTransitionError: If the assessment is not in progress
            AssessmentError: If the question is not part of the current set
        """
        session = self.require_session(session_id)
        self._require_state(session, AssessmentState.IN_PROGRESS, "record response")

        if session.get_question(question_id) is None:
            raise AssessmentError(f"Unknown question: {question_id}")

        replaced = session.responses.get_rating(question_id) is not None
        session.responses.set_rating(question_id, rating, notes)

        logger.debug(
            f"Session {session_id}: {'updated' if replaced else 'recorded'} "
            f"rating {rating} for {question_id}"
        )
        return self.get_progress(session_id)

    async def navigate(self, session_id: str, direction: str) -> dict[str, Any]:
        """
        Move to the next or previous question.

        The index stays within the question range.
        """
        session = self.require_session(session_id)
        self._require_state(session, AssessmentState.IN_PROGRESS, "navigate")

        steps = {"next": 1, "previous": -1}
        if direction not in steps:
            raise AssessmentError(f"Unknown direction: {direction}")

        session.move(steps[direction])
        return self.get_current_question(session_id)

    def get_current_question(self, session_id: str) -> dict[str, Any]:
        """Current question with the rating already given to it, if any."""
        session = self.require_session(session_id)
        question = session.get_current_question()

        return {
            "question_number": session.current_question_index + 1 if question else 0,
            "total_questions": session.total_questions,
            "question": question.model_dump() if question else None,
            "rating": session.responses.get_rating(question.id) if question else None,
            "is_first": session.current_question_index == 0,
            "is_last": question is not None and session.current_question_index >= session.total_questions - 1,
        }

    def get_progress(self, session_id: str) -> dict[str, Any]:
        session = self.require_session(session_id)
        return {
            "session_id": session_id,
            "state": session.state.value,
            "answered": session.responses.answered_count,
            "total_questions": session.total_questions,
            "progress_percentage": session.progress_percentage,
            "current_question_index": session.current_question_index,
            "duration_seconds": session.get_duration_seconds(),
        }

    async def complete_assessment(self, session_id: str) -> AssessmentResult:
        """
        Compute and freeze the result.

        Raises:
            StateTransitionError: If the assessment is not in progress
            AssessmentError: If no question has been answered
        """
        session = self.require_session(session_id)
        self._require_state(session, AssessmentState.IN_PROGRESS, "complete assessment")

        if session.responses.answered_count == 0:
            raise AssessmentError("Answer at least one question before completing the assessment")

        result = self.result_generator.generate(session)
        await self.transition_state(session_id, AssessmentState.COMPLETED)
        session.result = result
        return result

    async def abandon_assessment(self, session_id: str) -> dict[str, Any]:
        """Discard the responses of an unfinished assessment."""
        session = self.require_session(session_id)
        answered = session.responses.answered_count

        await self.transition_state(session_id, AssessmentState.ABANDONED)
        session.responses.clear()

        return {
            "action": "abandoned",
            "session_id": session_id,
            "discarded_responses": answered,
        }

    def get_result(self, session_id: str) -> AssessmentResult:
        """
        Get the frozen result of a completed assessment.

        Raises:
            StateTransitionError: If the assessment is not completed
        """
        session = self.require_session(session_id)
        if session.state != AssessmentState.COMPLETED or session.result is None:
            raise StateTransitionError(
                f"Assessment not complete. Current state: {session.state.value}"
            )
        return session.result

    # =========================================================================
    # EVENT CALLBACKS
    # =========================================================================

    def on_state_change(
        self,
        callback: Callable[[str, AssessmentState, AssessmentState], Awaitable[None]]
    ) -> None:
        """Register a callback for state changes."""
        self._state_change_callbacks.append(callback)
