"""Service layer for aspirations (long-term goals shown on the portfolio)."""

from __future__ import annotations

import logging
from types import ModuleType
from typing import List

from portfolio_api.app.core.db import transaction
from portfolio_api.app.core.exceptions import NotFoundException
from portfolio_api.app.mappers import aspiration_mapper
from portfolio_api.app.repositories import AspirationRepository
from portfolio_api.app.schemas import AspirationDTO

logger = logging.getLogger(__name__)

ENTITY_NAME = "Aspiration"
DEFAULT_PROFILE_ID = 1


class AspirationService:
    """Service class for managing aspirations."""

    def __init__(self, repository: AspirationRepository, mapper: ModuleType = aspiration_mapper) -> None:
        self.repository = repository
        self.mapper = mapper

    def get_aspirations_by_profile_id(self, profile_id: int = DEFAULT_PROFILE_ID) -> List[AspirationDTO]:
        with transaction(read_only=True) as conn:
            return self.mapper.to_dto_list(self.repository.find_by_profile_id_ordered(conn, profile_id))

    def get_aspiration_by_id(self, aspiration_id: int) -> AspirationDTO:
        with transaction(read_only=True) as conn:
            aspiration = self.repository.find_by_id(conn, aspiration_id)
            if aspiration is None:
                raise NotFoundException(ENTITY_NAME, aspiration_id)
            return self.mapper.to_dto(aspiration)

    def add_aspiration(self, dto: AspirationDTO) -> AspirationDTO:
        with transaction() as conn:
            aspiration = self.mapper.to_entity(dto)
            aspiration.aspiration_id = None
            saved = self.repository.save(conn, aspiration)
        logger.info("Created aspiration %s for profile %s", saved.aspiration_id, saved.profile_id)
        return self.mapper.to_dto(saved)

    def update_aspiration(self, aspiration_id: int, dto: AspirationDTO) -> AspirationDTO:
        with transaction() as conn:
            existing = self.repository.find_by_id(conn, aspiration_id)
            if existing is None:
                raise NotFoundException(ENTITY_NAME, aspiration_id)

            existing.slug = dto.id
            existing.title = dto.title
            existing.subtitle = dto.subtitle
            existing.status_text = dto.status_text
            existing.progress_percent = dto.progress_percent
            existing.variant = dto.variant
            existing.footer_text = dto.footer_text
            existing.animated = dto.animated
            existing.sort_order = dto.sort_order

            updated = self.repository.save(conn, existing)
        logger.info("Updated aspiration %s", aspiration_id)
        return self.mapper.to_dto(updated)

    def delete_aspiration(self, aspiration_id: int) -> bool:
        with transaction() as conn:
            if not self.repository.exists_by_id(conn, aspiration_id):
                raise NotFoundException(ENTITY_NAME, aspiration_id)
            self.repository.delete_by_id(conn, aspiration_id)
        logger.info("Deleted aspiration %s", aspiration_id)
        return True
