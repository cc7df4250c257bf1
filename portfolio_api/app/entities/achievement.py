"""Achievement row: a badge with progress shown on the portfolio."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Achievement:
    """Row of the ``achievement`` table.

    ``slug`` is the client-facing identifier (at most 50 characters)
    and is distinct from the numeric ``achievement_id``.
    """

    achievement_id: Optional[int] = None
    profile_id: Optional[int] = None
    slug: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    emoji: Optional[str] = None
    progress_percent: Optional[int] = None
    variant: Optional[str] = None
    stat_label: Optional[str] = None
    stat_value: Optional[str] = None
    sort_order: Optional[int] = None
