"""Achievement entity <-> AchievementDTO (``slug`` <-> ``id``)."""

from typing import Iterable, List

from portfolio_api.app.entities import Achievement
from portfolio_api.app.schemas import AchievementDTO


def to_dto(achievement: Achievement) -> AchievementDTO:
    return AchievementDTO(
        achievement_id=achievement.achievement_id,
        profile_id=achievement.profile_id,
        id=achievement.slug,
        title=achievement.title,
        subtitle=achievement.subtitle,
        emoji=achievement.emoji,
        progress_percent=achievement.progress_percent,
        variant=achievement.variant,
        stat_label=achievement.stat_label,
        stat_value=achievement.stat_value,
        sort_order=achievement.sort_order,
    )


def to_dto_list(achievements: Iterable[Achievement]) -> List[AchievementDTO]:
    return [to_dto(achievement) for achievement in achievements]


def to_entity(dto: AchievementDTO) -> Achievement:
    return Achievement(
        achievement_id=dto.achievement_id,
        profile_id=dto.profile_id,
        slug=dto.id,
        title=dto.title,
        subtitle=dto.subtitle,
        emoji=dto.emoji,
        progress_percent=dto.progress_percent,
        variant=dto.variant,
        stat_label=dto.stat_label,
        stat_value=dto.stat_value,
        sort_order=dto.sort_order,
    )
