"""Profile row: the portfolio owner's identity and display data."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Profile:
    """Row of the ``profile`` table."""

    profile_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    # Up to 500 characters.
    photo_url: Optional[str] = None
    status: Optional[str] = None
