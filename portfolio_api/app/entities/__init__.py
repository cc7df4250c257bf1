"""
Persistence entities.

Each entity is a plain dataclass mirroring one table row.  Child
records refer to their profile through an explicit ``profile_id``
column; the parent is loaded only when a caller asks the profile
repository for it.
"""

from .achievement import Achievement
from .aspiration import Aspiration
from .experience import Experience
from .profile import Profile

__all__ = ["Achievement", "Aspiration", "Experience", "Profile"]
