"""
settings.py

This module provides configuration management for cvtr using Pydantic's
settings management capabilities. Settings are loaded from environment
variables or a .env file and can be customized through nested environment
variables.

Core Interfaces:
- LoggingSettings: Defines logging-related configs such as log levels and file paths.
- Settings: The main settings class that aggregates all configurations.
- reload_settings: A utility function to reload settings from the environment.

Example Usage:
```python
from cvtr.settings import settings

settings.logging.console_log_level = "DEBUG"
settings.label_width = 10
```

or utilizing environment variables:
```bash
export CVTR__LOGGING__DISABLED=true
export CVTR__LOGGING__CONSOLE_LOG_LEVEL=DEBUG
export CVTR__INT_WIDTH=128
export CVTR__LABEL_WIDTH=10
```
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "LoggingSettings",
    "Settings",
    "reload_settings",
    "settings",
]


class LoggingSettings(BaseModel):
    """
    Logging settings for the application
    """

    disabled: bool = Field(
        default=False,
        description=(
            "True to disable all logging, False (default) to enable logging. "
        ),
    )
    clear_loggers: bool = Field(
        default=True,
        description=(
            "True (default) to remove all logging handlers that may have been added "
            "to the logger through other packages. False to keep the existing ones."
        ),
    )
    console_log_level: str = Field(
        default="WARNING",
        description=(
            "The log level for the console logger, which writes to stderr so that "
            "conversion results on stdout stay clean. This should be a valid log "
            "level string (e.g. DEBUG, INFO, WARNING, ERROR, CRITICAL)."
        ),
    )
    log_file: Optional[str] = Field(
        default=None,
        description=(
            "The path to the log file. If this is set, the logger will log to this file"
            " as well as to the console. If not set, the logger will only log to the "
            "console."
        ),
    )
    log_file_level: Optional[str] = Field(
        default=None,
        description=(
            "The log level for the file logger. This should be a valid log level string"
            " (e.g. DEBUG, INFO, WARNING, ERROR, CRITICAL). If not set and log_file is"
            " given, the file logger uses INFO."
        ),
    )


class Settings(BaseSettings):
    """
    All the settings are powered by pydantic_settings and can be set through
    environment variables or .env file. The environment variables are prefixed with
    `CVTR__` and nested properties are separated by `__`. For example, to set
    the `disabled` property of the `LoggingSettings` class, you can set the
    environment variable `CVTR__LOGGING__DISABLED=true`.
    """

    model_config = SettingsConfigDict(
        env_prefix="CVTR__",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
        env_file=".env",
    )

    logging: LoggingSettings = LoggingSettings()

    int_width: int = Field(
        default=64,
        ge=64,
        le=128,
        description=(
            "Width in bits of the unsigned integer numerals are parsed into. "
            "Values that do not fit are reported as an overflow."
        ),
    )
    label_width: int = Field(
        default=0,
        ge=0,
        description=(
            "Minimum width of the '<label>:' column in the output. 0 (default) "
            "separates label and value with a single space."
        ),
    )

    @field_validator("int_width")
    @classmethod
    def check_int_width(cls, value: int) -> int:
        if value % 8:
            raise ValueError(f"int_width must be a multiple of 8, got {value}")
        return value


settings = Settings()


def reload_settings():
    """
    Reload the settings from the environment variables
    """
    new_settings = Settings()
    settings.__dict__.update(new_settings.__dict__)
