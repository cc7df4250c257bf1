"""
Version 1 of the portfolio API.

Mounted under ``/api/v1``.  Breaking changes belong in a new version
subpackage.
"""
