"""
Top-level package for the portfolio API.

All functionality lives in ``portfolio_api.app``; run the service with
``uvicorn portfolio_api.app.main:app``.
"""

__all__ = []
