"""Process-wide defaults for the sklog package.

Initial values come from the environment (``SKLOG_DEFAULT_LEVEL``,
``SKLOG_DEFAULT_COLORIZE``) or a ``.env`` file, and can be changed at any time
through the accessor functions below.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sklog.levels import LogLevel
from sklog.logging import logger


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SKLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    default_level: LogLevel = Field(
        LogLevel.DEBUG,
        description="Level used by loggers that have no level of their own",
    )
    default_colorize: bool = Field(
        True, description="Whether new loggers wrap their output in ANSI colors"
    )

    @field_validator("default_level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> LogLevel:
        return LogLevel.parse(value)  # type: ignore[arg-type]


settings = Settings()


def get_default_level() -> LogLevel:
    return settings.default_level


def set_default_level(level: LogLevel | str | int) -> None:
    """Change the level used by every logger without a level override."""
    settings.default_level = LogLevel.parse(level)
    logger.debug("Default log level set to {level}", level=settings.default_level.name)


def get_default_colorize() -> bool:
    return settings.default_colorize


def set_default_colorize(colorize: bool) -> None:
    """Change the colorize flag picked up by loggers created from now on."""
    settings.default_colorize = colorize
    logger.debug("Default colorize set to {colorize}", colorize=colorize)


def reset_defaults() -> None:
    """Restore the defaults from the environment, discarding runtime changes."""
    fresh = Settings()
    settings.default_level = fresh.default_level
    settings.default_colorize = fresh.default_colorize
