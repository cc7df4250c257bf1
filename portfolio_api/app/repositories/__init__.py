"""
Data-access layer.

One repository per table.  Repositories hold no connection of their
own: every method receives the ``sqlite3.Connection`` of the calling
service's transaction, so a service call reads and writes through a
single transaction.
"""

from .achievement_repository import AchievementRepository
from .aspiration_repository import AspirationRepository
from .experience_repository import ExperienceRepository
from .profile_repository import ProfileRepository

__all__ = [
    "AchievementRepository",
    "AspirationRepository",
    "ExperienceRepository",
    "ProfileRepository",
]
