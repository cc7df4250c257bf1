"""
Pydantic schema for profiles.

A profile carries the portfolio owner's name, photo and a short status
line.  Every field is optional on the wire: an update replaces all of
them, so a field left out of a PUT body is cleared.
"""

from typing import Optional

from pydantic import Field

from .common import CamelModel


class ProfileDTO(CamelModel):
    """Profile as exchanged with clients."""

    profile_id: Optional[int] = Field(None, description="Database identifier, generated on create")
    first_name: Optional[str] = Field(None, description="Given name (required by clients)")
    last_name: Optional[str] = Field(None, description="Family name (required by clients)")
    photo_url: Optional[str] = Field(None, description="Profile photo URL, up to 500 characters")
    status: Optional[str] = Field(None, description="Status or tagline shown on the profile")
