"""
Pydantic schema for experience entries.

Dates travel as ISO calendar dates (``YYYY-MM-DD``).  A ``null``
``endDate`` marks the current position.
"""

from datetime import date
from typing import Optional

from pydantic import Field

from .common import CamelModel


class ExperienceDTO(CamelModel):
    """Professional experience entry."""

    experience_id: Optional[int] = Field(None, description="Database identifier, generated on create")
    profile_id: Optional[int] = Field(None, description="Owning profile")
    id: Optional[str] = Field(None, description="Client-facing slug, up to 50 characters")
    company: Optional[str] = Field(None, description="Company name, up to 100 characters")
    role: Optional[str] = None
    role_style: Optional[str] = Field(None, description="Role badge style, up to 20 characters")
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = Field(None, description="Null while the position is ongoing")
    sort_order: Optional[int] = Field(None, description="Display order; lower values first")
