"""Repository for the ``aspiration`` table."""

from typing import Any

from portfolio_api.app.entities import Aspiration

from .base import ProfileChildRepository


class AspirationRepository(ProfileChildRepository[Aspiration]):
    table = "aspiration"
    id_column = "aspiration_id"
    columns = (
        "profile_id",
        "slug",
        "title",
        "subtitle",
        "status_text",
        "progress_percent",
        "variant",
        "footer_text",
        "animated",
        "sort_order",
    )
    entity_class = Aspiration

    # SQLite has no boolean type; ``animated`` is stored as 0/1.
    def _to_db(self, column: str, value: Any) -> Any:
        if column == "animated" and value is not None:
            return int(bool(value))
        return value

    def _from_db(self, column: str, value: Any) -> Any:
        if column == "animated" and value is not None:
            return bool(value)
        return value
