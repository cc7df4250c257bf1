"""Aspiration row: a long-term goal with progress and a status label."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Aspiration:
    """Row of the ``aspiration`` table."""

    aspiration_id: Optional[int] = None
    profile_id: Optional[int] = None
    slug: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    status_text: Optional[str] = None
    progress_percent: Optional[int] = None
    variant: Optional[str] = None
    footer_text: Optional[str] = None
    animated: Optional[bool] = None
    sort_order: Optional[int] = None
