"""
Main API router for CompetencyCheck

Aggregates all API routes and provides the main application router.
"""

from fastapi import APIRouter

from src.api.endpoints import assessment, results, metadata, platform

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    assessment.router,
    prefix="/assessment",
    tags=["Assessment"]
)

api_router.include_router(
    results.router,
    prefix="/results",
    tags=["Results"]
)

api_router.include_router(
    metadata.router,
    prefix="/metadata",
    tags=["Metadata"]
)

api_router.include_router(
    platform.router,
    prefix="/platform",
    tags=["Platform"]
)
