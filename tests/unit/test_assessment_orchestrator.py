"""
Unit tests for the assessment lifecycle.

Covers session setup, the state machine, response recording,
navigation, completion and abandonment.
"""

from __future__ import annotations

import pytest

from src.core.assessment_orchestrator import (
    AssessmentError,
    AssessmentOrchestrator,
    SessionNotFoundError,
    StateTransitionError,
)
from src.core.result_generator import ResultGenerator
from src.models.assessment import AssessmentSetup, AssessmentState
from src.models.result import CompetencyLevel, RecommendationPriority
from tests.conftest import DOMAIN_RATINGS


async def start_session(orchestrator: AssessmentOrchestrator, role: str = "teacher") -> str:
    session = await orchestrator.create_session(AssessmentSetup(job_role_id=role))
    await orchestrator.start_assessment(session.session_id)
    return session.session_id


async def answer_all(orchestrator: AssessmentOrchestrator, session_id: str) -> None:
    session = orchestrator.require_session(session_id)
    for question in session.questions:
        await orchestrator.record_response(
            session_id, question.id, DOMAIN_RATINGS[question.domain_name]
        )


class TestSessionSetup:

    @pytest.mark.asyncio
    async def test_create_session(self, orchestrator: AssessmentOrchestrator) -> None:
        session = await orchestrator.create_session(AssessmentSetup(job_role_id="special-ed"))

        assert session.state == AssessmentState.NOT_STARTED
        assert session.job_title == "Special Education Teacher"
        assert session.assessment_type == "ACI Competency Assessment"
        assert session.questions == []
        assert orchestrator.get_session(session.session_id) is session

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", ["", "astronaut"])
    async def test_job_role_required(self, orchestrator: AssessmentOrchestrator, role: str) -> None:
        with pytest.raises(AssessmentError, match="Please select your job title"):
            await orchestrator.create_session(AssessmentSetup(job_role_id=role))

    @pytest.mark.asyncio
    async def test_catalog_assessment_sets_type(self, orchestrator: AssessmentOrchestrator) -> None:
        session = await orchestrator.create_session(
            AssessmentSetup(job_role_id="teacher", assessment_id="assessment-2")
        )

        assert session.assessment_type == "Teaching & Learning Self-Assessment"

    @pytest.mark.asyncio
    async def test_unknown_catalog_assessment(self, orchestrator: AssessmentOrchestrator) -> None:
        with pytest.raises(AssessmentError, match="Unknown assessment"):
            await orchestrator.create_session(
                AssessmentSetup(job_role_id="teacher", assessment_id="assessment-99")
            )

    def test_missing_session(self, orchestrator: AssessmentOrchestrator) -> None:
        assert orchestrator.get_session("nope") is None
        with pytest.raises(SessionNotFoundError):
            orchestrator.require_session("nope")


class TestStart:

    @pytest.mark.asyncio
    async def test_start_generates_questions(self, orchestrator: AssessmentOrchestrator) -> None:
        session = await orchestrator.create_session(AssessmentSetup(job_role_id="teacher"))

        started = await orchestrator.start_assessment(session.session_id)

        assert started["state"] == "in_progress"
        assert started["total_questions"] == 32
        assert len(started["questions"]) == 32
        assert started["current_question"]["id"] == started["questions"][0]["id"]
        assert session.started_at is not None

    @pytest.mark.asyncio
    async def test_start_twice_rejected(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)

        with pytest.raises(StateTransitionError):
            await orchestrator.start_assessment(session_id)

    @pytest.mark.asyncio
    async def test_generation_delay(self, question_builder) -> None:
        orchestrator = AssessmentOrchestrator(question_builder, generation_delay_seconds=0.01)

        session_id = await start_session(orchestrator)

        assert orchestrator.require_session(session_id).total_questions == 32


class TestResponses:

    @pytest.mark.asyncio
    async def test_respond_before_start_rejected(self, orchestrator: AssessmentOrchestrator) -> None:
        session = await orchestrator.create_session(AssessmentSetup(job_role_id="teacher"))

        with pytest.raises(StateTransitionError):
            await orchestrator.record_response(session.session_id, "q-any", 3)

    @pytest.mark.asyncio
    async def test_unknown_question_rejected(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)

        with pytest.raises(AssessmentError, match="Unknown question"):
            await orchestrator.record_response(session_id, "q-unknown", 3)

    @pytest.mark.asyncio
    async def test_re_answering_keeps_count(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)
        question_id = orchestrator.require_session(session_id).questions[0].id

        await orchestrator.record_response(session_id, question_id, 2)
        progress = await orchestrator.record_response(session_id, question_id, 5)

        assert progress["answered"] == 1
        assert progress["progress_percentage"] == pytest.approx(100 / 32)
        assert orchestrator.get_current_question(session_id)["rating"] == 5


class TestNavigation:

    @pytest.mark.asyncio
    async def test_navigate_clamps_to_range(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)

        current = await orchestrator.navigate(session_id, "previous")
        assert current["question_number"] == 1
        assert current["is_first"] is True

        current = await orchestrator.navigate(session_id, "next")
        assert current["question_number"] == 2
        assert current["is_first"] is False

        for _ in range(40):
            current = await orchestrator.navigate(session_id, "next")
        assert current["question_number"] == 32
        assert current["is_last"] is True

    @pytest.mark.asyncio
    async def test_unknown_direction(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)

        with pytest.raises(AssessmentError):
            await orchestrator.navigate(session_id, "sideways")


class TestCompletion:

    @pytest.mark.asyncio
    async def test_complete_without_responses_rejected(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)

        with pytest.raises(AssessmentError, match="at least one question"):
            await orchestrator.complete_assessment(session_id)

        assert orchestrator.require_session(session_id).state == AssessmentState.IN_PROGRESS

    @pytest.mark.asyncio
    async def test_complete_before_start_rejected(self, orchestrator: AssessmentOrchestrator) -> None:
        session = await orchestrator.create_session(AssessmentSetup(job_role_id="teacher"))

        with pytest.raises(StateTransitionError):
            await orchestrator.complete_assessment(session.session_id)

    @pytest.mark.asyncio
    async def test_complete_produces_result(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)
        await answer_all(orchestrator, session_id)

        result = await orchestrator.complete_assessment(session_id)

        assert orchestrator.require_session(session_id).state == AssessmentState.COMPLETED
        assert orchestrator.get_result(session_id) is result
        assert result.job_title == "Classroom Teacher"
        assert result.overall_score == pytest.approx(3.0)
        assert [(d.domain, d.level) for d in result.domain_scores] == [
            ("Teaching & Learning", CompetencyLevel.EXPERT),
            ("Student Support & Wellbeing", CompetencyLevel.PROFICIENT),
            ("Professional Growth & Leadership", CompetencyLevel.EMERGING),
            ("Technology & Innovation", CompetencyLevel.BEGINNING),
        ]
        assert result.strengths == [
            "Strong performance in Teaching & Learning",
            "Strong performance in Student Support & Wellbeing",
        ]
        assert [r.priority for r in result.recommendations] == [
            RecommendationPriority.MEDIUM,
            RecommendationPriority.HIGH,
        ]

    @pytest.mark.asyncio
    async def test_completed_is_terminal(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)
        question_id = orchestrator.require_session(session_id).questions[0].id
        await orchestrator.record_response(session_id, question_id, 4)
        await orchestrator.complete_assessment(session_id)

        with pytest.raises(StateTransitionError):
            await orchestrator.record_response(session_id, question_id, 1)
        with pytest.raises(StateTransitionError):
            await orchestrator.complete_assessment(session_id)
        with pytest.raises(StateTransitionError):
            await orchestrator.abandon_assessment(session_id)

    @pytest.mark.asyncio
    async def test_result_unavailable_before_completion(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)

        with pytest.raises(StateTransitionError, match="not complete"):
            orchestrator.get_result(session_id)


class TestAbandon:

    @pytest.mark.asyncio
    async def test_abandon_discards_responses(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)
        session = orchestrator.require_session(session_id)
        await orchestrator.record_response(session_id, session.questions[0].id, 3)
        await orchestrator.record_response(session_id, session.questions[1].id, 4)

        outcome = await orchestrator.abandon_assessment(session_id)

        assert outcome == {
            "action": "abandoned",
            "session_id": session_id,
            "discarded_responses": 2,
        }
        assert session.state == AssessmentState.ABANDONED
        assert session.responses.answered_count == 0

    @pytest.mark.asyncio
    async def test_abandon_before_start(self, orchestrator: AssessmentOrchestrator) -> None:
        session = await orchestrator.create_session(AssessmentSetup(job_role_id="teacher"))

        await orchestrator.abandon_assessment(session.session_id)

        with pytest.raises(StateTransitionError):
            await orchestrator.start_assessment(session.session_id)


class TestStateCallbacks:

    @pytest.mark.asyncio
    async def test_callbacks_receive_transitions(self, orchestrator: AssessmentOrchestrator) -> None:
        seen = []

        async def record(session_id, old_state, new_state):
            seen.append((old_state, new_state))

        orchestrator.on_state_change(record)
        session_id = await start_session(orchestrator)
        await orchestrator.abandon_assessment(session_id)

        assert seen == [
            (AssessmentState.NOT_STARTED, AssessmentState.IN_PROGRESS),
            (AssessmentState.IN_PROGRESS, AssessmentState.ABANDONED),
        ]

    @pytest.mark.asyncio
    async def test_failing_callback_does_not_block_transition(
        self, orchestrator: AssessmentOrchestrator
    ) -> None:
        async def broken(session_id, old_state, new_state):
            raise RuntimeError("listener down")

        orchestrator.on_state_change(broken)
        session_id = await start_session(orchestrator)

        assert orchestrator.require_session(session_id).state == AssessmentState.IN_PROGRESS


class TestResultSummary:

    @pytest.mark.asyncio
    async def test_summary(self, orchestrator: AssessmentOrchestrator) -> None:
        session_id = await start_session(orchestrator)
        await answer_all(orchestrator, session_id)
        result = await orchestrator.complete_assessment(session_id)

        summary = ResultGenerator().generate_summary(result)

        assert summary.result_id == result.id
        assert summary.overall_score == 3.0
        assert summary.overall_level == CompetencyLevel.DEVELOPING
        assert summary.top_domain == "Teaching & Learning"
        assert summary.top_development_area == (
            "Professional Growth & Leadership requires focused development"
        )
        assert summary.recommendation_count == 2

    def test_summary_without_domains(self) -> None:
        from datetime import date

        from src.models.result import AssessmentResult

        result = AssessmentResult(
            id="result-x",
            assessment_type="ACI Competency Assessment",
            job_title="Educator",
            completed_at=date(2025, 1, 1),
            overall_score=0.0,
        )

        summary = ResultGenerator().generate_summary(result)

        assert summary.top_domain == "N/A"
        assert summary.top_development_area == "N/A"


class TestConcurrentStart:

    @pytest.mark.asyncio
    async def test_abandon_during_generation_delay(self, question_builder) -> None:
        """A session abandoned while questions are generated is left untouched."""
        import asyncio

        orchestrator = AssessmentOrchestrator(question_builder, generation_delay_seconds=0.05)
        session = await orchestrator.create_session(AssessmentSetup(job_role_id="teacher"))

        start = asyncio.create_task(orchestrator.start_assessment(session.session_id))
        await asyncio.sleep(0)
        await orchestrator.abandon_assessment(session.session_id)

        with pytest.raises(StateTransitionError):
            await start

        assert session.state == AssessmentState.ABANDONED
        assert session.questions == []

    @pytest.mark.asyncio
    async def test_second_start_during_delay_keeps_first_question_set(self, question_builder) -> None:
        import asyncio

        orchestrator = AssessmentOrchestrator(question_builder, generation_delay_seconds=0.05)
        session = await orchestrator.create_session(AssessmentSetup(job_role_id="teacher"))

        first = asyncio.create_task(orchestrator.start_assessment(session.session_id))
        await asyncio.sleep(0)
        second = asyncio.create_task(orchestrator.start_assessment(session.session_id))

        await first
        questions = session.questions
        await orchestrator.record_response(session.session_id, questions[0].id, 4)

        with pytest.raises(StateTransitionError):
            await second

        assert session.questions is questions
        assert session.responses.answered_count == 1


class TestCurrentQuestionBeforeStart:

    @pytest.mark.asyncio
    async def test_no_question_is_not_last(self, orchestrator: AssessmentOrchestrator) -> None:
        session = await orchestrator.create_session(AssessmentSetup(job_role_id="teacher"))

        current = orchestrator.get_current_question(session.session_id)

        assert current["question"] is None
        assert current["question_number"] == 0
        assert current["is_last"] is False


class TestDuration:

    @pytest.mark.asyncio
    async def test_progress_reports_duration(self, orchestrator: AssessmentOrchestrator) -> None:
        from datetime import timedelta

        session = await orchestrator.create_session(AssessmentSetup(job_role_id="teacher"))
        assert orchestrator.get_progress(session.session_id)["duration_seconds"] == 0.0

        await orchestrator.start_assessment(session.session_id)
        question_id = session.questions[0].id
        await orchestrator.record_response(session.session_id, question_id, 4)
        await orchestrator.complete_assessment(session.session_id)
        session.started_at = session.completed_at - timedelta(minutes=12)

        assert orchestrator.get_progress(session.session_id)["duration_seconds"] == 720.0
