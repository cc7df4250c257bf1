"""
Application package initializer.

The application is organised in layers: ``api`` (HTTP routes),
``services`` (business rules), ``repositories`` and ``mappers``
(persistence and conversion), ``entities`` and ``schemas`` (row and
wire shapes) and ``core`` (configuration, database, security, errors,
logging).
"""

from .main import app  # noqa: F401
