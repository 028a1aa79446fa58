"""Module: config."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # Primary SQLAlchemy connection string for the backend database.
    database_url: str
    # Mount point for every resource router.
    api_prefix: str = "/api"
    # Browser origins allowed to call the API (front end dev servers).
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:8080",
        "http://127.0.0.1:8080",
    ]
    log_level: str = "INFO"
    # Bind address for the `vetclinic-api` launcher.
    host: str = "0.0.0.0"
    port: int = 5000
    # Create missing tables when the app starts; migrations remain the source of truth.
    create_tables_on_startup: bool = True

    # Behaviour switches for the historically inconsistent handlers.
    # Deleting a pet that does not exist answers 404 instead of success.
    pet_delete_missing_is_not_found: bool = False
    # A pet whose owner row is gone is hidden from the detail endpoint.
    pet_lookup_requires_owner: bool = True
    # "replace": fields present in the body overwrite, falsy values included.
    # "coalesce": a falsy value falls back to the stored one.
    vaccination_update_mode: Literal["replace", "coalesce"] = "replace"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}")
        return level

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"
        extra = "ignore"


# Global settings instance imported by app modules at runtime.
settings = Settings()
