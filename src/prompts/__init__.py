"""
Question templates for CompetencyCheck

Turns behavioral indicators into self-assessment statements.
"""

from src.prompts.questions import QuestionTemplates

__all__ = ["QuestionTemplates"]
