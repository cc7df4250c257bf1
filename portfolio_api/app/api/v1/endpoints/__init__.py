"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one record type.  GET routes are
public; POST, PUT and DELETE routes depend on
``core.security.get_current_user``.
"""
