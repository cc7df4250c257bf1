"""
Pydantic schema definitions for API payloads.

Each record type has one DTO used for request and response bodies.
DTOs are separate from the persistence entities: the client-facing
slug is called ``id`` here, and the parent profile is a plain
``profileId``.  JSON keys are camelCase.
"""

from .achievement import AchievementDTO
from .aspiration import AspirationDTO
from .experience import ExperienceDTO
from .profile import ProfileDTO

__all__ = ["AchievementDTO", "AspirationDTO", "ExperienceDTO", "ProfileDTO"]
