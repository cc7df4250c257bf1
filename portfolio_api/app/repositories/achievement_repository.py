"""Repository for the ``achievement`` table."""

from portfolio_api.app.entities import Achievement

from .base import ProfileChildRepository


class AchievementRepository(ProfileChildRepository[Achievement]):
    table = "achievement"
    id_column = "achievement_id"
    columns = (
        "profile_id",
        "slug",
        "title",
        "subtitle",
        "emoji",
        "progress_percent",
        "variant",
        "stat_label",
        "stat_value",
        "sort_order",
    )
    entity_class = Achievement
