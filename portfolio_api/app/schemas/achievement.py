"""Pydantic schema for achievements."""

from typing import Optional

from pydantic import Field

from .common import CamelModel


class AchievementDTO(CamelModel):
    """Achievement badge as rendered by the portfolio front end."""

    achievement_id: Optional[int] = Field(None, description="Database identifier, generated on create")
    profile_id: Optional[int] = Field(None, description="Owning profile")
    id: Optional[str] = Field(None, description="Client-facing slug, up to 50 characters")
    title: Optional[str] = None
    subtitle: Optional[str] = None
    emoji: Optional[str] = Field(None, description="Badge icon, up to 10 characters")
    progress_percent: Optional[int] = Field(None, description="Completion percentage, 0-100 by convention")
    variant: Optional[str] = Field(None, description="Card style variant, up to 20 characters")
    stat_label: Optional[str] = Field(None, description="Statistic label, up to 50 characters")
    stat_value: Optional[str] = Field(None, description="Statistic value, up to 50 characters")
    sort_order: Optional[int] = Field(None, description="Display order; lower values first")
