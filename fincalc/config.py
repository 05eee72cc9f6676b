"""Application configuration loaded from environment variables.

Statutory tax figures are deliberately absent here; they live in
``fincalc.constants`` and do not vary by environment.
"""

import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    """Centralized application settings."""

    # Server
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "8000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # HTTP surface
    API_PREFIX: str = os.getenv("API_PREFIX", "/api/v1")
    CORS_ORIGINS: list[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]


settings = Settings()
