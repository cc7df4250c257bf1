"""Repository for the ``experience`` table."""

from datetime import date
from typing import Any

from portfolio_api.app.entities import Experience

from .base import ProfileChildRepository

DATE_COLUMNS = {"start_date", "end_date"}


class ExperienceRepository(ProfileChildRepository[Experience]):
    table = "experience"
    id_column = "experience_id"
    columns = (
        "profile_id",
        "slug",
        "company",
        "role",
        "role_style",
        "description",
        "start_date",
        "end_date",
        "sort_order",
    )
    entity_class = Experience

    # Dates are stored as ISO-8601 text (YYYY-MM-DD).
    def _to_db(self, column: str, value: Any) -> Any:
        if column in DATE_COLUMNS and isinstance(value, date):
            return value.isoformat()
        return value

    def _from_db(self, column: str, value: Any) -> Any:
        if column in DATE_COLUMNS and value is not None:
            return date.fromisoformat(value)
        return value
