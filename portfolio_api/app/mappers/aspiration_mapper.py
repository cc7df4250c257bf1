"""Aspiration entity <-> AspirationDTO (``slug`` <-> ``id``)."""

from typing import Iterable, List

from portfolio_api.app.entities import Aspiration
from portfolio_api.app.schemas import AspirationDTO


def to_dto(aspiration: Aspiration) -> AspirationDTO:
    return AspirationDTO(
        aspiration_id=aspiration.aspiration_id,
        profile_id=aspiration.profile_id,
        id=aspiration.slug,
        title=aspiration.title,
        subtitle=aspiration.subtitle,
        status_text=aspiration.status_text,
        progress_percent=aspiration.progress_percent,
        variant=aspiration.variant,
        footer_text=aspiration.footer_text,
        animated=aspiration.animated,
        sort_order=aspiration.sort_order,
    )


def to_dto_list(aspirations: Iterable[Aspiration]) -> List[AspirationDTO]:
    return [to_dto(aspiration) for aspiration in aspirations]


def to_entity(dto: AspirationDTO) -> Aspiration:
    return Aspiration(
        aspiration_id=dto.aspiration_id,
        profile_id=dto.profile_id,
        slug=dto.id,
        title=dto.title,
        subtitle=dto.subtitle,
        status_text=dto.status_text,
        progress_percent=dto.progress_percent,
        variant=dto.variant,
        footer_text=dto.footer_text,
        animated=dto.animated,
        sort_order=dto.sort_order,
    )
