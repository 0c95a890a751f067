"""
API endpoint modules for CompetencyCheck
"""

from src.api.endpoints import assessment, results, metadata, platform

__all__ = ["assessment", "results", "metadata", "platform"]
