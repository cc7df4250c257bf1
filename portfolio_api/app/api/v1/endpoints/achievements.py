"""
Achievement endpoints for API v1.

Achievements are badges with a progress percentage.  Listing and
retrieval are public; changes require a valid bearer token.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query

from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.dependencies import get_achievement_service
from portfolio_api.app.schemas import AchievementDTO
from portfolio_api.app.services import AchievementService

router = APIRouter()


@router.get("", response_model=List[AchievementDTO])
def get_achievements_by_profile_id(
    profile_id: int = Query(1, alias="profileId"),
    service: AchievementService = Depends(get_achievement_service),
) -> List[AchievementDTO]:
    """Return the achievements of a profile (default: profile 1) by ``sortOrder``."""
    return service.get_achievements_by_profile_id(profile_id)


@router.get("/{achievement_id}", response_model=AchievementDTO)
def get_achievement_by_id(
    achievement_id: int,
    service: AchievementService = Depends(get_achievement_service),
) -> AchievementDTO:
    """Retrieve a single achievement by ID.  Returns 404 if it does not exist."""
    return service.get_achievement_by_id(achievement_id)


@router.post("", response_model=AchievementDTO)
def add_achievement(
    current_user: Dict[str, Any] = Depends(get_current_user),
    dto: AchievementDTO = Body(...),
    service: AchievementService = Depends(get_achievement_service),
) -> AchievementDTO:
    """Create an achievement (owner only)."""
    return service.add_achievement(dto)


@router.put("/{achievement_id}", response_model=AchievementDTO)
def update_achievement(
    achievement_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    dto: AchievementDTO = Body(...),
    service: AchievementService = Depends(get_achievement_service),
) -> AchievementDTO:
    """Replace every field of an achievement (owner only)."""
    return service.update_achievement(achievement_id, dto)


@router.delete("/{achievement_id}", response_model=bool)
def delete_achievement(
    achievement_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: AchievementService = Depends(get_achievement_service),
) -> bool:
    """Delete an achievement (owner only)."""
    return service.delete_achievement(achievement_id)
