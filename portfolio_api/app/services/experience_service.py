"""
Service layer for work experience entries.

Provides retrieval by profile, individual lookup, creation, full
replacement and deletion.  Every method runs in its own transaction.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import List

from portfolio_api.app.core.db import transaction
from portfolio_api.app.core.exceptions import NotFoundException
from portfolio_api.app.mappers import experience_mapper
from portfolio_api.app.repositories import ExperienceRepository
from portfolio_api.app.schemas import ExperienceDTO

logger = logging.getLogger(__name__)

ENTITY_NAME = "Experience"
DEFAULT_PROFILE_ID = 1


class ExperienceService:
    """Service class for managing experience entries."""

    def __init__(self, repository: ExperienceRepository, mapper: ModuleType = experience_mapper) -> None:
        self.repository = repository
        self.mapper = mapper

    def get_experiences_by_profile_id(self, profile_id: int = DEFAULT_PROFILE_ID) -> List[ExperienceDTO]:
        """Return the profile's experiences ordered by ``sort_order``."""
        with transaction(read_only=True) as conn:
            return self.mapper.to_dto_list(self.repository.find_by_profile_id_ordered(conn, profile_id))

    def get_experience_by_id(self, experience_id: int) -> ExperienceDTO:
        """Return one experience or raise ``NotFoundException``."""
        with transaction(read_only=True) as conn:
            experience = self.repository.find_by_id(conn, experience_id)
            if experience is None:
                raise NotFoundException(ENTITY_NAME, experience_id)
            return self.mapper.to_dto(experience)

    def add_experience(self, dto: ExperienceDTO) -> ExperienceDTO:
        """Insert a new experience; the generated id is only in the result."""
        with transaction() as conn:
            experience = self.mapper.to_entity(dto)
            experience.experience_id = None
            saved = self.repository.save(conn, experience)
        logger.info("Created experience %s for profile %s", saved.experience_id, saved.profile_id)
        return self.mapper.to_dto(saved)

    def update_experience(self, experience_id: int, dto: ExperienceDTO) -> ExperienceDTO:
        """Replace every mutable field of an experience with the values in ``dto``."""
        with transaction() as conn:
            existing = self.repository.find_by_id(conn, experience_id)
            if existing is None:
                raise NotFoundException(ENTITY_NAME, experience_id)

            existing.slug = dto.id
            existing.company = dto.company
            existing.role = dto.role
            existing.role_style = dto.role_style
            existing.description = dto.description
            existing.start_date = dto.start_date
            existing.end_date = dto.end_date
            existing.sort_order = dto.sort_order

            updated = self.repository.save(conn, existing)
        logger.info("Updated experience %s", experience_id)
        return self.mapper.to_dto(updated)

    def delete_experience(self, experience_id: int) -> bool:
        """Delete an experience.  Returns ``True``; raises if it does not exist."""
        with transaction() as conn:
            if not self.repository.exists_by_id(conn, experience_id):
                raise NotFoundException(ENTITY_NAME, experience_id)
            self.repository.delete_by_id(conn, experience_id)
        logger.info("Deleted experience %s", experience_id)
        return True
