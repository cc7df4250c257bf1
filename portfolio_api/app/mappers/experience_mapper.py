"""Experience entity <-> ExperienceDTO (``slug`` <-> ``id``)."""

from typing import Iterable, List

from portfolio_api.app.entities import Experience
from portfolio_api.app.schemas import ExperienceDTO


def to_dto(experience: Experience) -> ExperienceDTO:
    return ExperienceDTO(
        experience_id=experience.experience_id,
        profile_id=experience.profile_id,
        id=experience.slug,
        company=experience.company,
        role=experience.role,
        role_style=experience.role_style,
        description=experience.description,
        start_date=experience.start_date,
        end_date=experience.end_date,
        sort_order=experience.sort_order,
    )


def to_dto_list(experiences: Iterable[Experience]) -> List[ExperienceDTO]:
    return [to_dto(experience) for experience in experiences]


def to_entity(dto: ExperienceDTO) -> Experience:
    return Experience(
        experience_id=dto.experience_id,
        profile_id=dto.profile_id,
        slug=dto.id,
        company=dto.company,
        role=dto.role,
        role_style=dto.role_style,
        description=dto.description,
        start_date=dto.start_date,
        end_date=dto.end_date,
        sort_order=dto.sort_order,
    )
