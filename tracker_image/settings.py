"""
Tracker Image Settings - Configuration management using Pydantic Settings.

Loads configuration from environment variables only.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuildSettings(BaseSettings):
    """
    Build configuration settings.

    Settings are loaded from:
    1. Environment variables (highest priority, empty values are ignored)
    2. Default values (lowest priority)

    Values are passed to the image build verbatim, nothing is validated.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    user_uid: str = Field(
        default="1000",
        description="UID of the user the tracker runs as inside the image (env: TORRUST_TRACKER_USER_UID)",
        validation_alias="TORRUST_TRACKER_USER_UID",
    )

    run_as_user: str = Field(
        default="appuser",
        description="Name of the user the tracker runs as inside the image (env: TORRUST_TRACKER_RUN_AS_USER)",
        validation_alias="TORRUST_TRACKER_RUN_AS_USER",
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR) (env: TORRUST_TRACKER_BUILDER_LOG_LEVEL)",
        validation_alias="TORRUST_TRACKER_BUILDER_LOG_LEVEL",
    )


# Global settings instance
_settings: BuildSettings | None = None


def get_settings() -> BuildSettings:
    """
    Get the global settings instance.

    Creates the settings instance on first call, then returns cached instance.

    Returns:
        BuildSettings instance
    """
    global _settings
    if _settings is None:
        _settings = BuildSettings()
    return _settings


def reload_settings() -> BuildSettings:
    """
    Reload settings from the environment.

    Returns:
        Fresh BuildSettings instance
    """
    global _settings
    _settings = BuildSettings()
    return _settings
