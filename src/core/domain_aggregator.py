"""
Domain Aggregator

Groups ratings by competency domain, averages them, and maps each
average to a qualitative level.
"""

import logging

from src.models.assessment import AssessmentQuestion, AssessmentResponse
from src.models.result import CompetencyLevel, DomainScore

logger = logging.getLogger(__name__)


class DomainAggregator:
    """
    Scores an assessment by domain.

    Responsibilities:
    - Average ratings per domain (exact, no rounding)
    - Assign the qualitative level of each average
    - Combine domain averages into the overall score
    """

    def aggregate(
        self,
        questions: list[AssessmentQuestion],
        responses: list[AssessmentResponse],
    ) -> list[DomainScore]:
        """
        Compute per-domain averages.

        Domains appear in question-set order. A domain none of whose
        questions were answered gets no score.

        Args:
            questions: Current question set
            responses: Ratings given so far

        Returns:
            One DomainScore per answered domain
        """
        ratings = {r.question_id: r.rating for r in responses}
        totals: dict[str, list[int]] = {}

        for question in questions:
            rating = ratings.get(question.id)
            if rating is None:
                continue
            totals.setdefault(question.domain_name, []).append(rating)

        domain_scores = []
        for domain, domain_ratings in totals.items():
            score = sum(domain_ratings) / len(domain_ratings)
            domain_scores.append(DomainScore(
                domain=domain,
                score=score,
                level=self.level_for(score),
                response_count=len(domain_ratings),
            ))

        logger.debug(f"Aggregated {len(responses)} responses into {len(domain_scores)} domains")
        return domain_scores

    def level_for(self, score: float) -> CompetencyLevel:
        """Map an average rating to its qualitative level."""
        return CompetencyLevel.from_score(score)

    def overall_score(self, domain_scores: list[DomainScore]) -> float:
        """
        Unweighted mean of the domain averages.

        Each domain counts once regardless of how many of its questions
        were answered.
        """
        if not domain_scores:
            raise ValueError("Cannot compute an overall score without domain scores")
        return sum(d.score for d in domain_scores) / len(domain_scores)
