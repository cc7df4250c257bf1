"""Repository for the ``profile`` table."""

from portfolio_api.app.entities import Profile

from .base import TableRepository


class ProfileRepository(TableRepository[Profile]):
    table = "profile"
    id_column = "profile_id"
    columns = ("first_name", "last_name", "photo_url", "status")
    entity_class = Profile
