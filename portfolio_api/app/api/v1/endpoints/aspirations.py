"""Aspiration endpoints for API v1.  Reads are public, writes need a bearer token."""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query

from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.dependencies import get_aspiration_service
from portfolio_api.app.schemas import AspirationDTO
from portfolio_api.app.services import AspirationService

router = APIRouter()


@router.get("", response_model=List[AspirationDTO])
def get_aspirations_by_profile_id(
    profile_id: int = Query(1, alias="profileId"),
    service: AspirationService = Depends(get_aspiration_service),
) -> List[AspirationDTO]:
    """Return the aspirations of a profile (default: profile 1) by ``sortOrder``."""
    return service.get_aspirations_by_profile_id(profile_id)


@router.get("/{aspiration_id}", response_model=AspirationDTO)
def get_aspiration_by_id(
    aspiration_id: int,
    service: AspirationService = Depends(get_aspiration_service),
) -> AspirationDTO:
    """Retrieve a single aspiration by ID.  Returns 404 if it does not exist."""
    return service.get_aspiration_by_id(aspiration_id)


@router.post("", response_model=AspirationDTO)
def add_aspiration(
    current_user: Dict[str, Any] = Depends(get_current_user),
    dto: AspirationDTO = Body(...),
    service: AspirationService = Depends(get_aspiration_service),
) -> AspirationDTO:
    """Create an aspiration (owner only)."""
    return service.add_aspiration(dto)


@router.put("/{aspiration_id}", response_model=AspirationDTO)
def update_aspiration(
    aspiration_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    dto: AspirationDTO = Body(...),
    service: AspirationService = Depends(get_aspiration_service),
) -> AspirationDTO:
    """Replace every field of an aspiration (owner only)."""
    return service.update_aspiration(aspiration_id, dto)


@router.delete("/{aspiration_id}", response_model=bool)
def delete_aspiration(
    aspiration_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    service: AspirationService = Depends(get_aspiration_service),
) -> bool:
    """Delete an aspiration (owner only)."""
    return service.delete_aspiration(aspiration_id)
