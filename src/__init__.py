"""
CompetencyCheck - Educator Competency Assessment Service

Generates role-specific self-assessment questions from a competency
framework, collects 1-5 ratings, and produces domain scores, levels and
development recommendations.
"""

__version__ = "0.1.0"
__author__ = "CompetencyCheck Team"
