"""
Profile endpoints for API v1.

Anyone may read a profile; creating, replacing and deleting one needs
a valid bearer token.  Unlike the child record types, a profile is
deleted through a query parameter: ``DELETE /profiles?profileId=1``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query

from portfolio_api.app.core.security import get_current_user
from portfolio_api.app.dependencies import get_profile_service
from portfolio_api.app.schemas import ProfileDTO
from portfolio_api.app.services import ProfileService

router = APIRouter()


@router.get("/{profile_id}", response_model=ProfileDTO)
def get_profile_by_id(
    profile_id: int,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDTO:
    """Retrieve a profile by ID.  Returns 404 if it does not exist."""
    return service.get_profile_by_id(profile_id)


@router.post("", response_model=ProfileDTO)
def add_profile(
    current_user: Dict[str, Any] = Depends(get_current_user),
    dto: ProfileDTO = Body(...),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDTO:
    """Create a profile (owner only)."""
    return service.add_profile(dto)


@router.put("/{profile_id}", response_model=ProfileDTO)
def update_profile(
    profile_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    dto: ProfileDTO = Body(...),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDTO:
    """Replace every field of a profile (owner only).

    Fields missing from the body are cleared, not kept.
    """
    return service.update_profile(profile_id, dto)


@router.delete("", response_model=bool)
def delete_profile(
    current_user: Dict[str, Any] = Depends(get_current_user),
    profile_id: int = Query(..., alias="profileId"),
    service: ProfileService = Depends(get_profile_service),
) -> bool:
    """Delete a profile together with its child records (owner only)."""
    return service.delete_profile(profile_id)
