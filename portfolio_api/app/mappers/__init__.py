"""
Conversion between persistence entities and DTOs.

Each module exposes ``to_dto``, ``to_dto_list`` and ``to_entity``.  The
functions are pure: they never touch the store and never load a
parent profile.  Child mappers rename ``slug`` to ``id`` and carry the
parent as a bare ``profile_id``.
"""

from . import achievement_mapper, aspiration_mapper, experience_mapper, profile_mapper

__all__ = ["achievement_mapper", "aspiration_mapper", "experience_mapper", "profile_mapper"]
