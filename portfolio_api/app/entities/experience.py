"""Experience row: one position held at a company."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Experience:
    """Row of the ``experience`` table.

    ``end_date`` of ``None`` marks the current position.
    """

    experience_id: Optional[int] = None
    profile_id: Optional[int] = None
    slug: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    role_style: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    sort_order: Optional[int] = None
