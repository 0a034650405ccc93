"""Configuration for the BFF service.

Settings come from environment variables, optionally seeded from a
``.env`` file next to the backend sources. ``get_settings()`` caches one
validated instance for the process; tests call ``reset_settings()`` after
changing the environment.

Example .env:
    APP_ENV=development
    PORT=3001
    LOG_LEVEL=DEBUG
    CORS_ORIGINS=http://localhost:5173
"""

import os
from pathlib import Path
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

ENV_FILE = Path(__file__).resolve().parent.parent / ".env"

PRODUCTION_ORIGINS = ["https://celleret.app"]
DEVELOPMENT_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]
CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]
CORS_HEADERS = ["Content-Type", "Authorization"]


class Settings(BaseModel):
    """Validated service settings."""

    model_config = ConfigDict(frozen=True)

    app_env: Literal["development", "production", "test"] = "development"
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    app_version: str = "0.1.0"
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    jwt_secret: str = "your-secret-key-change-in-production"
    jwt_expires_in: str = "7d"
    cors_origins: List[str] = Field(default_factory=list)
    wine_repository: Literal["inmemory"] = "inmemory"
    user_repository: Literal["inmemory"] = "inmemory"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    def allowed_origins(self) -> List[str]:
        """CORS origins: explicit override, else per-environment defaults."""
        if self.cors_origins:
            return list(self.cors_origins)
        if self.is_production:
            return list(PRODUCTION_ORIGINS)
        return list(DEVELOPMENT_ORIGINS)


def load_settings() -> Settings:
    """Build settings from the environment.

    Raises:
        ValueError: If a variable fails validation (e.g. APP_ENV=staging,
            PORT=abc, LOG_LEVEL=verbose, WINE_REPOSITORY=mongodb)
    """
    if ENV_FILE.exists():
        load_dotenv(ENV_FILE)

    raw_origins = os.getenv("CORS_ORIGINS", "")
    values = {
        "app_env": os.getenv("APP_ENV", "development").lower(),
        "host": os.getenv("HOST", "0.0.0.0"),
        "port": os.getenv("PORT", "3001"),
        "log_level": os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
        "supabase_url": os.getenv("SUPABASE_URL"),
        "supabase_anon_key": os.getenv("SUPABASE_ANON_KEY"),
        "jwt_secret": os.getenv("JWT_SECRET", "your-secret-key-change-in-production"),
        "jwt_expires_in": os.getenv("JWT_EXPIRES_IN", "7d"),
        "cors_origins": [o.strip() for o in raw_origins.split(",") if o.strip()],
        "wine_repository": os.getenv("WINE_REPOSITORY", "inmemory").strip().lower(),
        "user_repository": os.getenv("USER_REPOSITORY", "inmemory").strip().lower(),
    }
    # pydantic.ValidationError is a ValueError subclass
    return Settings(**values)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get singleton settings instance."""
    global _settings

    if _settings is None:
        _settings = load_settings()

    return _settings


def reset_settings() -> None:
    """Reset the singleton (for testing purposes)."""
    global _settings
    _settings = None
