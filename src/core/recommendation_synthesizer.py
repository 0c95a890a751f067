"""
Recommendation Synthesizer

Turns domain scores into strengths, development areas and
priority-tagged recommendations.
"""

from pydantic import BaseModel, Field

from src.models.result import DomainScore, Recommendation, RecommendationPriority

STRENGTH_THRESHOLD = 4.0
DEVELOPMENT_THRESHOLD = 3.0
HIGH_PRIORITY_THRESHOLD = 2.0


class Synthesis(BaseModel):
    """Qualitative feedback derived from domain scores."""

    strengths: list[str] = Field(default_factory=list)
    development_areas: list[str] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)


class RecommendationSynthesizer:
    """Derives feedback from domain scores using fixed thresholds."""

    def synthesize(self, domain_scores: list[DomainScore]) -> Synthesis:
        """
        Inspect every domain score.

        A domain at or above 4 is a strength. A domain below 3 is a
        development area and gets a recommendation, high priority
        below 2 and medium otherwise.
        """
        synthesis = Synthesis()

        for domain_score in domain_scores:
            if domain_score.score >= STRENGTH_THRESHOLD:
                synthesis.strengths.append(self._strength(domain_score))
            elif domain_score.score < DEVELOPMENT_THRESHOLD:
                synthesis.development_areas.append(self._development_area(domain_score))
                synthesis.recommendations.append(self._recommendation(domain_score))

        return synthesis

    def _strength(self, domain_score: DomainScore) -> str:
        return f"Strong performance in {domain_score.domain}"

    def _development_area(self, domain_score: DomainScore) -> str:
        return f"{domain_score.domain} requires focused development"

    def _recommendation(self, domain_score: DomainScore) -> Recommendation:
        priority = (
            RecommendationPriority.HIGH
            if domain_score.score < HIGH_PRIORITY_THRESHOLD
            else RecommendationPriority.MEDIUM
        )
        return Recommendation(
            title=f"Develop {domain_score.domain} Skills",
            description=(
                "Consider professional development opportunities focused on "
                f"{domain_score.domain.lower()} competencies."
            ),
            priority=priority,
        )
