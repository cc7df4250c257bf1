"""Pydantic schema for aspirations."""

from typing import Optional

from pydantic import Field

from .common import CamelModel


class AspirationDTO(CamelModel):
    """Aspiration (future goal) card."""

    aspiration_id: Optional[int] = Field(None, description="Database identifier, generated on create")
    profile_id: Optional[int] = Field(None, description="Owning profile")
    id: Optional[str] = Field(None, description="Client-facing slug, up to 50 characters")
    title: Optional[str] = None
    subtitle: Optional[str] = None
    status_text: Optional[str] = Field(None, description="Short status label, e.g. 'In Progress'")
    progress_percent: Optional[int] = Field(None, description="Completion percentage, 0-100 by convention")
    variant: Optional[str] = Field(None, description="Card style variant, up to 20 characters")
    footer_text: Optional[str] = None
    animated: Optional[bool] = Field(None, description="Whether the progress indicator animates")
    sort_order: Optional[int] = Field(None, description="Display order; lower values first")
