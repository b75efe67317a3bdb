"""
Centralized configuration for the Startup Mentor backend.

All settings are loaded from environment variables with sensible defaults.
Services receive the settings object through their constructor instead of
reading the environment themselves.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = "Startup Mentor API"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
    )
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings (the regex reflects any request origin)
    cors_origins: list[str] = []
    cors_origin_regex: Optional[str] = ".*"
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Authorization", "Content-Type", "Cookie"]

    # Supabase
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_url", "next_public_supabase_url"),
    )
    supabase_anon_key: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_anon_key", "next_public_supabase_anon_key"),
    )
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""

    # Feature Flags
    enable_auth_diagnostics: Optional[bool] = None

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def auth_diagnostics_enabled(self) -> bool:
        """Diagnostics are exposed outside production unless set explicitly."""
        if self.enable_auth_diagnostics is not None:
            return self.enable_auth_diagnostics
        return not self.is_production


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
