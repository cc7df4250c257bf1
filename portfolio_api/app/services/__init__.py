"""
Service layer.

Each service owns the business rules for one record type: look the
record up or fail with ``NotFoundException``, copy fields, persist.
Services are built with explicit references to their repository and
mapper (see ``portfolio_api.app.dependencies``) and run every public
method inside one ``core.db.transaction``.
"""

from .achievement_service import AchievementService
from .aspiration_service import AspirationService
from .experience_service import ExperienceService
from .profile_service import ProfileService

__all__ = ["AchievementService", "AspirationService", "ExperienceService", "ProfileService"]
