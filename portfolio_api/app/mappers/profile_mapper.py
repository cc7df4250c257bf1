"""Profile entity <-> ProfileDTO."""

from typing import Iterable, List

from portfolio_api.app.entities import Profile
from portfolio_api.app.schemas import ProfileDTO


def to_dto(profile: Profile) -> ProfileDTO:
    return ProfileDTO(
        profile_id=profile.profile_id,
        first_name=profile.first_name,
        last_name=profile.last_name,
        photo_url=profile.photo_url,
        status=profile.status,
    )


def to_dto_list(profiles: Iterable[Profile]) -> List[ProfileDTO]:
    return [to_dto(profile) for profile in profiles]


def to_entity(dto: ProfileDTO) -> Profile:
    return Profile(
        profile_id=dto.profile_id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        photo_url=dto.photo_url,
        status=dto.status,
    )
