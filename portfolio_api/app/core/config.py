"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field except
the token signing secret, which must be supplied by the deployment
(``JWT_SECRET``, or ``SUPABASE_JWT_SECRET`` for compatibility with the
identity provider's naming).  Without it every bearer token is
rejected and only the public read endpoints remain usable.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_CORS_ORIGINS = ",".join(
    [
        "http://localhost:4200",
        "https://boredsoftwaredeveloper.xyz",
        "https://www.boredsoftwaredeveloper.xyz",
    ]
)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Portfolio Profile API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional file that receives a copy of the console log.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Shared HMAC secret used to verify tokens issued by the external
    # identity provider.  Never hard-code a value here.
    jwt_secret: str = os.getenv("JWT_SECRET", os.getenv("SUPABASE_JWT_SECRET", ""))
    jwt_algorithm: str = "HS256"
    # Clock skew tolerated when checking ``exp`` and ``nbf``.
    jwt_leeway_seconds: int = int(os.getenv("JWT_LEEWAY_SECONDS", "60"))
    # Lifetime of tokens minted by ``create_token.py`` for local testing.
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

    # Path or connection string for the SQLite database.  A relative
    # path is resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "portfolio.db")

    # Comma-separated list of origins allowed to call ``/api/**`` from
    # a browser.
    cors_origins: str = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

    cors_max_age: int = 3600
    cors_methods: List[str] = field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
