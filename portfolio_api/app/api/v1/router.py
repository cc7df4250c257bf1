"""
Top-level router for version 1 of the API.

Aggregates the per-record routers under a unified prefix.  When a new
record type is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import achievements, aspirations, experiences, profiles

router = APIRouter()

router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
router.include_router(achievements.router, prefix="/achievements", tags=["achievements"])
router.include_router(aspirations.router, prefix="/aspirations", tags=["aspirations"])
router.include_router(experiences.router, prefix="/experiences", tags=["experiences"])
