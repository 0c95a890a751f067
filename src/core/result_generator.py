"""
Result Generator

Compiles the final result of an assessment:
- Domain scores and levels
- Overall score
- Strengths and development areas
- Recommendations
"""

import logging
from datetime import datetime
from uuid import uuid4

from src.models.assessment import AssessmentSession
from src.models.result import AssessmentResult, CompetencyLevel, ResultSummary, display_score
from src.core.domain_aggregator import DomainAggregator
from src.core.recommendation_synthesizer import RecommendationSynthesizer

logger = logging.getLogger(__name__)


class ResultGenerator:
    """
    Generates assessment results.

    Runs the domain aggregation and the recommendation synthesis over a
    session's responses.
    """

    def __init__(
        self,
        aggregator: DomainAggregator | None = None,
        synthesizer: RecommendationSynthesizer | None = None,
    ):
        self.aggregator = aggregator or DomainAggregator()
        self.synthesizer = synthesizer or RecommendationSynthesizer()

    def generate(self, session: AssessmentSession) -> AssessmentResult:
        """
        Generate the result for a session.

        Args:
            session: Session with at least one response

        Returns:
            Complete AssessmentResult
        """
        domain_scores = self.aggregator.aggregate(
            session.questions,
            session.responses.responses(),
        )
        overall = self.aggregator.overall_score(domain_scores)
        synthesis = self.synthesizer.synthesize(domain_scores)

        result = AssessmentResult(
            id=f"result-{uuid4().hex[:12]}",
            assessment_type=session.assessment_type,
            job_title=session.job_title,
            completed_at=(session.completed_at or datetime.utcnow()).date(),
            overall_score=overall,
            domain_scores=domain_scores,
            strengths=synthesis.strengths,
            development_areas=synthesis.development_areas,
            recommendations=synthesis.recommendations,
        )

        logger.info(
            f"Generated result {result.id} for session {session.session_id}: "
            f"overall={overall:.2f}, domains={len(domain_scores)}, "
            f"recommendations={len(result.recommendations)}"
        )
        return result

    def generate_summary(self, result: AssessmentResult) -> ResultSummary:
        """Generate condensed result summary."""
        top_domain = max(result.domain_scores, key=lambda d: d.score).domain if result.domain_scores else "N/A"

        return ResultSummary(
            result_id=result.id,
            overall_score=display_score(result.overall_score),
            overall_level=CompetencyLevel.from_score(result.overall_score),
            top_domain=top_domain,
            top_development_area=result.development_areas[0] if result.development_areas else "N/A",
            recommendation_count=len(result.recommendations),
        )
