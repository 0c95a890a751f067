"""
Core business logic modules for CompetencyCheck

Contains:
- Assessment Orchestrator: State machine for the assessment lifecycle
- Question Set Builder: Indicator-based question generation
- Domain Aggregator: Domain averages and levels
- Recommendation Synthesizer: Strengths, development areas, recommendations
- Result Generator: Final result compilation
- Platform Client: Typed client for the product's RPC API
"""

from src.core.assessment_orchestrator import AssessmentOrchestrator
from src.core.question_builder import QuestionSetBuilder
from src.core.domain_aggregator import DomainAggregator
from src.core.recommendation_synthesizer import RecommendationSynthesizer
from src.core.result_generator import ResultGenerator
from src.core.platform_client import PlatformClient

__all__ = [
    "AssessmentOrchestrator",
    "QuestionSetBuilder",
    "DomainAggregator",
    "RecommendationSynthesizer",
    "ResultGenerator",
    "PlatformClient",
]
