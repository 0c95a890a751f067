"""
Self-Assessment Question Templates

Sentence templates that turn a behavioral indicator into a
role-specific self-assessment question.
"""


class QuestionTemplates:
    """
    Templates for indicator-based self-assessment questions.

    Placeholders:
        {job_title}  - title of the selected job role
        {domain}     - name of the indicator's competency domain
        {indicator}  - lower-cased behavioral indicator text
    """

    TEMPLATES: tuple[str, ...] = (
        'In your role as {job_title}, how frequently do you "{indicator}"?',
        'Considering your responsibilities as {job_title}, rate how often you "{indicator}"',
        'As a {job_title} working in {domain}, how consistently do you "{indicator}"?',
        'Reflect on your practice as {job_title}: How often do you "{indicator}"?',
    )

    def __len__(self) -> int:
        return len(self.TEMPLATES)

    def render(self, template_index: int, job_title: str, domain: str, indicator: str) -> str:
        """Fill one template with the question's context."""
        template = self.TEMPLATES[template_index % len(self.TEMPLATES)]
        return template.format(
            job_title=job_title,
            domain=domain,
            indicator=indicator.lower(),
        )
