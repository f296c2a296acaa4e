"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Debter"
    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./debter.db"
    DB_ECHO: bool = False

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:8080"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Rooms
    DEFAULT_CURRENCY: str = "HUF"
    DEFAULT_ROUNDING: float = 0.0  # Remaining balances below this are treated as settled
    ROOM_KEY_LENGTH: int = 6

    # Exchange Rate
    FX_API_KEY: str = ""
    FX_API_URL: str = "https://v6.exchangerate-api.com/v6"
    FX_TIMEOUT: float = 10.0

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # Emit one JSON object per log line

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
