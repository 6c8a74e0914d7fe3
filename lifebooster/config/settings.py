"""
Configuration Management for LifeBooster

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The core has no external services, so this is only about where the
document lives, how logs look, and what to fall back to when the
environment gives no hint about the user's currency.
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Local document storage configuration."""
    
    model_config = SettingsConfigDict(
        env_prefix="LIFEBOOSTER_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    data_dir: str = Field(
        default_factory=lambda: str(Path.home() / ".lifebooster"),
        description="Directory holding the stored document"
    )
    storage_key: str = Field(
        default="lifebooster_data",
        min_length=1,
        description="Name of the storage slot the document is written under"
    )
    
    @field_validator('storage_key')
    @classmethod
    def validate_storage_key(cls, v: str) -> str:
        """The key becomes a file name, so keep it to a safe alphabet."""
        if not re.fullmatch(r"[A-Za-z0-9_.-]+", v):
            raise ValueError(
                f"Storage key {v!r} may only contain letters, digits, '_', '.' and '-'"
            )
        return v
    
    @property
    def data_path(self) -> Path:
        """Data directory with '~' expanded."""
        return Path(self.data_dir).expanduser()


class AppSettings(BaseSettings):
    """
    Main application settings.
    
    Loads configuration from environment variables and .env file.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="LIFEBOOSTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON (False gives console output)"
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(?i:debug|info|warning|error|critical)$",
        description="Minimum level for the 'lifebooster' loggers"
    )
    
    # Locale hints for first-run currency detection
    locale: Optional[str] = Field(
        default=None,
        description="Locale override, e.g. 'fr_MA' (defaults to the process locale)"
    )
    timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone override, e.g. 'Africa/Casablanca'"
    )
    fallback_currency: str = Field(
        default="USD",
        pattern=r"^[A-Z]{3}$",
        description="Currency used when detection finds nothing"
    )
    
    # Identity
    user_id_prefix: str = Field(
        default="OP-",
        max_length=10,
        description="Prefix of the generated display user id"
    )


class Settings(BaseSettings):
    """
    Root settings container.
    
    Aggregates all sub-settings for easy access.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()
    
    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    
    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.
    
    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}
    
    settings = get_settings()
    
    try:
        _ = settings.storage
        results["storage"] = True
    except Exception as e:
        results["storage"] = False
        results["storage_error"] = str(e)
    
    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)
    
    return results
