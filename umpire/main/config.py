"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from umpire.shared import EnumEnvironment, EnumLogLevel


class UmpireSettings(BaseSettings):
    """HTTP service settings."""

    title: str = Field(default="Umpire", description="Service title")
    description: str = Field(
        default="Checks monitoring metrics against thresholds over HTTP",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(
        default=8000,
        description="Port to bind the server",
        validation_alias=AliasChoices("UMPIRE_PORT", "PORT"),
    )
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )
    api_key: Optional[str] = Field(
        default=None,
        description="Password expected in the Basic credentials of /check",
        validation_alias=AliasChoices("UMPIRE_API_KEY", "API_KEY"),
    )
    force_https: bool = Field(
        default=False,
        description="Redirect plain HTTP requests to HTTPS",
        validation_alias=AliasChoices("UMPIRE_FORCE_HTTPS", "FORCE_HTTPS"),
    )
    forwarded_allow_ips: str = Field(
        default="127.0.0.1",
        description="Comma-separated proxy addresses trusted for X-Forwarded-Proto",
        validation_alias=AliasChoices(
            "UMPIRE_FORWARDED_ALLOW_IPS", "FORWARDED_ALLOW_IPS"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="UMPIRE_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


class GraphiteSettings(BaseSettings):
    """Primary metrics backend."""

    url: str = Field(default="http://localhost:8080", description="graphite-web URL")
    timeout: float = Field(
        default=10.0, gt=0, description="Request timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_prefix="GRAPHITE_", case_sensitive=False, extra="ignore"
    )


class LibratoSettings(BaseSettings):
    """Secondary metrics backend."""

    url: str = Field(
        default="https://metrics-api.librato.com", description="Librato API URL"
    )
    email: Optional[str] = Field(default=None, description="Librato account email")
    key: Optional[str] = Field(default=None, description="Librato API token")
    timeout: float = Field(
        default=10.0, gt=0, description="Request timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_prefix="LIBRATO_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )
    json_output: Optional[bool] = Field(
        default=None,
        description="Render JSON logs (defaults to on in production only)",
        validation_alias=AliasChoices("LOG_JSON", "LOG_JSON_OUTPUT"),
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    umpire: UmpireSettings = Field(default_factory=UmpireSettings)
    graphite: GraphiteSettings = Field(default_factory=GraphiteSettings)
    librato: LibratoSettings = Field(default_factory=LibratoSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
