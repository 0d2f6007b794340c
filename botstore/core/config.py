"""
Configuration Settings.

This module defines the storage configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

Environment variables use the ``BOTSTORE_`` prefix and a double underscore (__)
as delimiter for nested properties. For example ``BOTSTORE_DATABASE__TYPE=postgres``
maps to ``settings.database.type``.
"""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SQLITE_LOCATION = "./data/storage/core.sqlite"

# =====================================================================
# Database Configuration Model
# =====================================================================


class DatabaseConfig(BaseModel):
    """Database connection configuration.

    The ``type`` field selects the storage backend. Only ``postgres`` (in any
    letter case) selects PostgreSQL; every other value selects SQLite.
    """

    type: str = Field(default="sqlite", description="Storage backend selector (sqlite or postgres)")
    url: Optional[str] = Field(
        default=None, description="Full PostgreSQL connection URL, takes precedence over the discrete fields"
    )
    host: str = Field(default="localhost", description="PostgreSQL database host address")
    port: int = Field(default=5432, description="PostgreSQL database port number")
    user: Optional[str] = Field(default=None, description="PostgreSQL database user")
    password: SecretStr = Field(default=SecretStr(""), description="PostgreSQL database password")
    database: Optional[str] = Field(default=None, description="PostgreSQL database name")
    ssl: bool = Field(default=False, description="Require SSL for the PostgreSQL connection")
    location: str = Field(default=DEFAULT_SQLITE_LOCATION, description="SQLite database file path")

    model_config = {"populate_by_name": True}

    @property
    def is_postgres(self) -> bool:
        return self.type.lower() == "postgres"


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_prefix="BOTSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write DEBUG logs to a file under log_file_dir",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig,
        description="Database configuration (SQLite, PostgreSQL)",
    )


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings instance, loading it on first use."""
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


settings = get_settings()
