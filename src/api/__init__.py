"""
API layer for CompetencyCheck

Contains FastAPI routers for:
- Assessment sessions
- Results
- Framework and reference metadata
- The platform API gateway
"""

from src.api.router import api_router

__all__ = ["api_router"]
