"""
Service layer for profiles.

A profile is the root record of the portfolio.  Deleting it also
removes its achievements, aspirations and experiences: the child
tables declare ``ON DELETE CASCADE``.
"""

from __future__ import annotations

import logging
from types import ModuleType

from portfolio_api.app.core.db import transaction
from portfolio_api.app.core.exceptions import NotFoundException
from portfolio_api.app.mappers import profile_mapper
from portfolio_api.app.repositories import ProfileRepository
from portfolio_api.app.schemas import ProfileDTO

logger = logging.getLogger(__name__)

ENTITY_NAME = "Profile"


class ProfileService:
    """Service class for managing profiles."""

    def __init__(self, repository: ProfileRepository, mapper: ModuleType = profile_mapper) -> None:
        self.repository = repository
        self.mapper = mapper

    def get_profile_by_id(self, profile_id: int) -> ProfileDTO:
        """Return the profile or raise ``NotFoundException``."""
        with transaction(read_only=True) as conn:
            profile = self.repository.find_by_id(conn, profile_id)
            if profile is None:
                raise NotFoundException(ENTITY_NAME, profile_id)
            return self.mapper.to_dto(profile)

    def add_profile(self, dto: ProfileDTO) -> ProfileDTO:
        """Insert a new profile and return it with its generated id."""
        with transaction() as conn:
            profile = self.mapper.to_entity(dto)
            profile.profile_id = None
            saved = self.repository.save(conn, profile)
        logger.info("Created profile %s", saved.profile_id)
        return self.mapper.to_dto(saved)

    def update_profile(self, profile_id: int, dto: ProfileDTO) -> ProfileDTO:
        """Replace the name, photo and status of an existing profile.

        Every field is taken from ``dto``; a field it leaves unset is
        stored as ``None`` rather than keeping the previous value.
        """
        with transaction() as conn:
            existing = self.repository.find_by_id(conn, profile_id)
            if existing is None:
                raise NotFoundException(ENTITY_NAME, profile_id)

            existing.first_name = dto.first_name
            existing.last_name = dto.last_name
            existing.photo_url = dto.photo_url
            existing.status = dto.status

            updated = self.repository.save(conn, existing)
        logger.info("Updated profile %s", profile_id)
        return self.mapper.to_dto(updated)

    def delete_profile(self, profile_id: int) -> bool:
        """Delete a profile (and, by cascade, its children).  Returns ``True``."""
        with transaction() as conn:
            if not self.repository.exists_by_id(conn, profile_id):
                raise NotFoundException(ENTITY_NAME, profile_id)
            self.repository.delete_by_id(conn, profile_id)
        logger.info("Deleted profile %s", profile_id)
        return True
