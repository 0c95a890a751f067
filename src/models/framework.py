"""
Competency framework, job role, and rating scale definitions

Defines the static taxonomy for:
- Competency domains and competencies
- Behavioral indicators
- Educator job roles
- The 1-5 rating scale
"""

from pydantic import BaseModel, Field


class Competency(BaseModel):
    """A single competency with its behavioral indicators."""

    id: str = Field(..., description="Unique competency identifier")
    name: str = Field(..., description="Human-readable competency name")
    description: str = Field(..., description="Competency description")
    indicators: list[str] = Field(
        default_factory=list,
        description="Observable behavioral indicators"
    )


class CompetencyDomain(BaseModel):
    """Top-level grouping of related competencies."""

    id: str = Field(..., description="Unique domain identifier")
    name: str = Field(..., description="Human-readable domain name")
    description: str = Field(..., description="Domain description")
    competencies: list[Competency] = Field(default_factory=list)


class JobRole(BaseModel):
    """Educator job role an assessment can be taken for."""

    id: str
    title: str
    description: str


class RatingLabel(BaseModel):
    """Label for a single point of the rating scale."""

    rating: int = Field(..., ge=1, le=5)
    label: str
    description: str


# ============================================================================
# ACI EDUCATOR FRAMEWORK
# ============================================================================

ACI_FRAMEWORK: list[CompetencyDomain] = [
    CompetencyDomain(
        id="teaching-learning",
        name="Teaching & Learning",
        description="Core competencies related to instructional practices and student learning",
        competencies=[
            Competency(
                id="lesson-planning",
                name="Lesson Planning & Curriculum Design",
                description="Ability to design effective, standards-aligned lesson plans",
                indicators=[
                    "Develops clear learning objectives aligned with curriculum standards",
                    "Creates differentiated instruction to meet diverse learner needs",
                    "Integrates formative assessment strategies into lesson design",
                    "Uses data to inform instructional planning",
                ],
            ),
            Competency(
                id="instructional-delivery",
                name="Instructional Delivery",
                description="Effective delivery of instruction using varied methodologies",
                indicators=[
                    "Uses multiple teaching strategies to engage all learners",
                    "Effectively manages instructional time",
                    "Provides clear explanations and demonstrations",
                    "Adapts instruction based on student responses",
                ],
            ),
            Competency(
                id="assessment-feedback",
                name="Assessment & Feedback",
                description="Using assessment to monitor and improve student learning",
                indicators=[
                    "Designs valid and reliable assessments",
                    "Provides timely and constructive feedback",
                    "Uses assessment data to adjust instruction",
                    "Involves students in self-assessment",
                ],
            ),
        ],
    ),
    CompetencyDomain(
        id="student-support",
        name="Student Support & Wellbeing",
        description="Competencies related to supporting student development and wellbeing",
        competencies=[
            Competency(
                id="inclusive-education",
                name="Inclusive Education",
                description="Creating inclusive learning environments for all students",
                indicators=[
                    "Identifies and addresses diverse learning needs",
                    "Implements accommodations and modifications",
                    "Creates culturally responsive learning experiences",
                    "Promotes equity and access for all students",
                ],
            ),
            Competency(
                id="social-emotional",
                name="Social-Emotional Learning",
                description="Supporting students' social and emotional development",
                indicators=[
                    "Creates a safe and supportive classroom environment",
                    "Teaches social-emotional skills explicitly",
                    "Recognizes signs of student distress",
                    "Builds positive relationships with students",
                ],
            ),
        ],
    ),
    CompetencyDomain(
        id="professional-growth",
        name="Professional Growth & Leadership",
        description="Competencies related to professional development and leadership",
        competencies=[
            Competency(
                id="continuous-learning",
                name="Continuous Professional Learning",
                description="Commitment to ongoing professional development",
                indicators=[
                    "Reflects on teaching practice regularly",
                    "Seeks feedback from colleagues and supervisors",
                    "Engages in professional learning communities",
                    "Applies new knowledge to improve practice",
                ],
            ),
            Competency(
                id="collaboration",
                name="Collaboration & Communication",
                description="Effective collaboration with colleagues, parents, and community",
                indicators=[
                    "Communicates effectively with parents and guardians",
                    "Collaborates with colleagues on curriculum and instruction",
                    "Participates in school improvement initiatives",
                    "Builds partnerships with community stakeholders",
                ],
            ),
        ],
    ),
    CompetencyDomain(
        id="technology-innovation",
        name="Technology & Innovation",
        description="Competencies related to educational technology and innovation",
        competencies=[
            Competency(
                id="digital-literacy",
                name="Digital Literacy & Technology Integration",
                description="Effective use of technology to enhance learning",
                indicators=[
                    "Integrates technology meaningfully into instruction",
                    "Teaches students digital citizenship",
                    "Uses technology for assessment and feedback",
                    "Explores innovative teaching approaches",
                ],
            ),
        ],
    ),
]


# ============================================================================
# JOB ROLES
# ============================================================================

JOB_ROLES: dict[str, JobRole] = {
    "teacher": JobRole(
        id="teacher",
        title="Classroom Teacher",
        description="Primary or secondary classroom teacher",
    ),
    "lead-teacher": JobRole(
        id="lead-teacher",
        title="Lead Teacher",
        description="Experienced teacher with leadership responsibilities",
    ),
    "department-head": JobRole(
        id="department-head",
        title="Department Head",
        description="Head of academic department",
    ),
    "curriculum-coordinator": JobRole(
        id="curriculum-coordinator",
        title="Curriculum Coordinator",
        description="Coordinates curriculum development",
    ),
    "special-ed": JobRole(
        id="special-ed",
        title="Special Education Teacher",
        description="Specialized support teacher",
    ),
    "instructional-coach": JobRole(
        id="instructional-coach",
        title="Instructional Coach",
        description="Supports teacher development",
    ),
}


# ============================================================================
# RATING SCALE
# ============================================================================

RATING_SCALE: dict[int, RatingLabel] = {
    1: RatingLabel(rating=1, label="Never", description="I never demonstrate this behavior"),
    2: RatingLabel(rating=2, label="Rarely", description="I rarely demonstrate this behavior"),
    3: RatingLabel(rating=3, label="Sometimes", description="I sometimes demonstrate this behavior"),
    4: RatingLabel(rating=4, label="Often", description="I often demonstrate this behavior"),
    5: RatingLabel(rating=5, label="Always", description="I consistently demonstrate this behavior"),
}

MIN_RATING = 1
MAX_RATING = 5


def get_job_role(role_id: str) -> JobRole | None:
    """Look up a job role by id."""
    return JOB_ROLES.get(role_id)


def count_indicators(framework: list[CompetencyDomain]) -> int:
    """Total number of behavioral indicators across a framework."""
    return sum(
        len(competency.indicators)
        for domain in framework
        for competency in domain.competencies
    )
