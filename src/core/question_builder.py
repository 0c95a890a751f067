"""
Question Set Builder

Produces one self-assessment question per behavioral indicator of the
competency framework, phrased for the selected job role.
"""

import logging
import random

from src.models.assessment import AssessmentQuestion
from src.models.framework import CompetencyDomain
from src.prompts.questions import QuestionTemplates

logger = logging.getLogger(__name__)


class QuestionSetBuilder:
    """
    Builds the question set for an assessment.

    Template selection modes:
    - "random": a template is drawn per question (seedable)
    - "rotate": templates are used in turn by question position
    """

    def __init__(
        self,
        framework: list[CompetencyDomain],
        mode: str = "random",
        seed: int | None = None,
        default_job_title: str = "Educator",
    ):
        if mode not in ("random", "rotate"):
            raise ValueError(f"Unknown template mode: {mode}")

        self.framework = framework
        self.mode = mode
        self.templates = QuestionTemplates()
        self.default_job_title = default_job_title
        self._rng = random.Random(seed)

    def build(self, job_title: str) -> list[AssessmentQuestion]:
        """
        Generate the ordered question list for a job title.

        Args:
            job_title: Role title substituted into every question;
                blank falls back to the default title

        Returns:
            One AssessmentQuestion per indicator, in framework order
        """
        job_title = job_title.strip() or self.default_job_title
        questions: list[AssessmentQuestion] = []

        for domain in self.framework:
            for competency in domain.competencies:
                for idx, indicator in enumerate(competency.indicators):
                    template_index = self._pick_template(len(questions))
                    questions.append(AssessmentQuestion(
                        id=f"q-{domain.id}-{competency.id}-{idx}",
                        competency_id=competency.id,
                        competency_name=competency.name,
                        domain_name=domain.name,
                        question=self.templates.render(
                            template_index,
                            job_title=job_title,
                            domain=domain.name,
                            indicator=indicator,
                        ),
                        behavioral_indicator=indicator,
                        ai_generated=True,
                    ))

        logger.info(f"Generated {len(questions)} assessment questions for {job_title}")
        return questions

    def _pick_template(self, position: int) -> int:
        if self.mode == "rotate":
            return position % len(self.templates)
        return self._rng.randrange(len(self.templates))
