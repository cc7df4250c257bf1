"""
Experience endpoints for API v1.

Experience entries describe positions held, newest or most relevant
first according to their ``sortOrder``.  Listing and retrieval are
public; changes require a valid bearer token.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query

from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.dependencies import get_experience_service
from portfolio_api.app.schemas import ExperienceDTO
from portfolio_api.app.services import ExperienceService

router = APIRouter()


@router.get("", response_model=List[ExperienceDTO])
def get_experiences_by_profile_id(
    profile_id: int = Query(1, alias="profileId"),
    service: ExperienceService = Depends(get_experience_service),
) -> List[ExperienceDTO]:
    """Return the experiences of a profile (default: profile 1) by ``sortOrder``."""
    return service.get_experiences_by_profile_id(profile_id)


@router.get("/{experience_id}", response_model=ExperienceDTO)
def get_experience_by_id(
    experience_id: int,
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceDTO:
    """Retrieve a single experience by ID.  Returns 404 if it does not exist."""
    return service.get_experience_by_id(experience_id)


@router.post("", response_model=ExperienceDTO)
def add_experience(
    current_user: Dict[str, Any] = Depends(get_current_user),
    dto: ExperienceDTO = Body(...),
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceDTO:
    """Create an experience (owner only)."""
    return service.add_experience(dto)


@router.put("/{experience_id}", response_model=ExperienceDTO)
def update_experience(
    experience_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    dto: ExperienceDTO = Body(...),
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceDTO:
    """Replace every field of an experience (owner only)."""
    return service.update_experience(experience_id, dto)


@router.delete("/{experience_id}", response_model=bool)
def delete_experience(
    experience_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: ExperienceService = Depends(get_experience_service),
) -> bool:
    """Delete an experience (owner only)."""
    return service.delete_experience(experience_id)
