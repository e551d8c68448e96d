"""
Base configuration settings.

Every settings group reads its own prefixed environment variables and the
optional `.env` file; `group_config` builds that shared model config.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


def group_config(env_prefix: str = "") -> SettingsConfigDict:
    """
    Model config for a settings group.

    Args:
        env_prefix: Prefix of the group's environment variables (e.g. "POSTGRES_")

    Returns:
        SettingsConfigDict: Case-insensitive, `.env`-backed, unknown keys ignored
    """
    return SettingsConfigDict(
        env_prefix=env_prefix,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class BaseSettings(PydanticBaseSettings):
    """Base configuration class for unprefixed settings."""

    model_config = group_config()
