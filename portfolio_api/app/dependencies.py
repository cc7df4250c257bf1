"""
Explicit wiring of services to their collaborators.

Services are built once, at import time, from concrete repository and
mapper references.  Routes receive them through the ``get_*_service``
providers, which tests can replace with
``app.dependency_overrides``.
"""

from portfolio_api.app.mappers import (
    achievement_mapper,
    aspiration_mapper,
    experience_mapper,
    profile_mapper,
)
from portfolio_api.app.repositories import (
    AchievementRepository,
    AspirationRepository,
    ExperienceRepository,
    ProfileRepository,
)
from portfolio_api.app.services import (
    AchievementService,
    AspirationService,
    ExperienceService,
    ProfileService,
)

_profile_service = ProfileService(ProfileRepository(), profile_mapper)
_achievement_service = AchievementService(AchievementRepository(), achievement_mapper)
_aspiration_service = AspirationService(AspirationRepository(), aspiration_mapper)
_experience_service = ExperienceService(ExperienceRepository(), experience_mapper)


def get_profile_service() -> ProfileService:
    return _profile_service


def get_achievement_service() -> AchievementService:
    return _achievement_service


def get_aspiration_service() -> AspirationService:
    return _aspiration_service


def get_experience_service() -> ExperienceService:
    return _experience_service
