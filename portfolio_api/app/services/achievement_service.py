"""
Service layer for achievements.

Achievements are listed per profile in ``sort_order``.  Creation does
not check that the parent profile exists; the store's foreign key
rejects orphans and the resulting ``sqlite3.IntegrityError`` surfaces
as an unexpected error.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import List

from portfolio_api.app.core.db import transaction
from portfolio_api.app.core.exceptions import NotFoundException
from portfolio_api.app.mappers import achievement_mapper
from portfolio_api.app.repositories import AchievementRepository
from portfolio_api.app.schemas import AchievementDTO

logger = logging.getLogger(__name__)

ENTITY_NAME = "Achievement"
DEFAULT_PROFILE_ID = 1


class AchievementService:
    """Service class for managing achievements."""

    def __init__(self, repository: AchievementRepository, mapper: ModuleType = achievement_mapper) -> None:
        self.repository = repository
        self.mapper = mapper

    def get_achievements_by_profile_id(self, profile_id: int = DEFAULT_PROFILE_ID) -> List[AchievementDTO]:
        """Return the profile's achievements, possibly none, by ascending sort order."""
        with transaction(read_only=True) as conn:
            return self.mapper.to_dto_list(self.repository.find_by_profile_id_ordered(conn, profile_id))

    def get_achievement_by_id(self, achievement_id: int) -> AchievementDTO:
        with transaction(read_only=True) as conn:
            achievement = self.repository.find_by_id(conn, achievement_id)
            if achievement is None:
                raise NotFoundException(ENTITY_NAME, achievement_id)
            return self.mapper.to_dto(achievement)

    def add_achievement(self, dto: AchievementDTO) -> AchievementDTO:
        with transaction() as conn:
            achievement = self.mapper.to_entity(dto)
            achievement.achievement_id = None
            saved = self.repository.save(conn, achievement)
        logger.info("Created achievement %s for profile %s", saved.achievement_id, saved.profile_id)
        return self.mapper.to_dto(saved)

    def update_achievement(self, achievement_id: int, dto: AchievementDTO) -> AchievementDTO:
        """Overwrite every mutable field of an achievement from ``dto``.

        The owning profile is kept.  Fields missing from ``dto`` are
        cleared.
        """
        with transaction() as conn:
            existing = self.repository.find_by_id(conn, achievement_id)
            if existing is None:
                raise NotFoundException(ENTITY_NAME, achievement_id)

            existing.slug = dto.id
            existing.title = dto.title
            existing.subtitle = dto.subtitle
            existing.emoji = dto.emoji
            existing.progress_percent = dto.progress_percent
            existing.variant = dto.variant
            existing.stat_label = dto.stat_label
            existing.stat_value = dto.stat_value
            existing.sort_order = dto.sort_order

            updated = self.repository.save(conn, existing)
        logger.info("Updated achievement %s", achievement_id)
        return self.mapper.to_dto(updated)

    def delete_achievement(self, achievement_id: int) -> bool:
        with transaction() as conn:
            if not self.repository.exists_by_id(conn, achievement_id):
                raise NotFoundException(ENTITY_NAME, achievement_id)
            self.repository.delete_by_id(conn, achievement_id)
        logger.info("Deleted achievement %s", achievement_id)
        return True
