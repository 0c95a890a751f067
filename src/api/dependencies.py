"""
API Dependencies

Provides dependency injection for API endpoints.
Manages singleton instances of core components.
"""

from src.config.settings import get_settings
from src.core.assessment_orchestrator import AssessmentOrchestrator
from src.core.question_builder import QuestionSetBuilder
from src.core.result_generator import ResultGenerator
from src.core.platform_client import PlatformClient
from src.models.framework import ACI_FRAMEWORK


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_orchestrator: AssessmentOrchestrator | None = None
_platform_client: PlatformClient | None = None


def get_orchestrator() -> AssessmentOrchestrator:
    """
    Get the assessment orchestrator singleton.

    Lazily initializes all required components.
    """
    global _orchestrator

    if _orchestrator is None:
        settings = get_settings()

        question_builder = QuestionSetBuilder(
            ACI_FRAMEWORK,
            mode=settings.question_template_mode,
            seed=settings.question_template_seed,
            default_job_title=settings.default_job_title,
        )

        _orchestrator = AssessmentOrchestrator(
            question_builder=question_builder,
            result_generator=ResultGenerator(),
            generation_delay_seconds=settings.question_generation_delay_seconds,
            default_assessment_type=settings.default_assessment_type,
            default_job_title=settings.default_job_title,
        )

    return _orchestrator


def get_platform_client() -> PlatformClient:
    """Get the platform API client singleton."""
    global _platform_client

    if _platform_client is None:
        _platform_client = PlatformClient()

    return _platform_client


async def cleanup():
    """Cleanup resources on shutdown."""
    global _orchestrator, _platform_client

    if _platform_client:
        await _platform_client.close()
        _platform_client = None

    _orchestrator = None
