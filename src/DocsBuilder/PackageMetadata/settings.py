# === NAVMAP v1 ===
# {
#   "module": "DocsBuilder.PackageMetadata.settings",
#   "purpose": "Environment-driven settings for the package metadata tooling.",
#   "sections": [
#     {
#       "id": "loglevel",
#       "name": "LogLevel",
#       "anchor": "class-loglevel",
#       "kind": "class"
#     },
#     {
#       "id": "logformat",
#       "name": "LogFormat",
#       "anchor": "class-logformat",
#       "kind": "class"
#     },
#     {
#       "id": "outputformat",
#       "name": "OutputFormat",
#       "anchor": "class-outputformat",
#       "kind": "class"
#     },
#     {
#       "id": "buildersettings",
#       "name": "BuilderSettings",
#       "anchor": "class-buildersettings",
#       "kind": "class"
#     },
#     {
#       "id": "load-settings",
#       "name": "load_settings",
#       "anchor": "function-load-settings",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""
Pydantic v2 settings for the package metadata tooling.

Settings are read from ``DOCSBUILDER_``-prefixed environment variables and can
be overridden by explicit keyword arguments (CLI > ENV > defaults). They only
govern how results are logged and rendered; manifest discovery and metadata
extraction have no tunables.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "BuilderSettings",
    "LogFormat",
    "LogLevel",
    "OutputFormat",
    "load_settings",
]


class LogLevel(str, Enum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Supported log output formats."""

    CONSOLE = "console"
    JSON = "json"


class OutputFormat(str, Enum):
    """How CLI commands render resolved metadata."""

    PRETTY = "pretty"
    JSON = "json"


class BuilderSettings(BaseSettings):
    """Application-level configuration for the metadata CLI."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSBUILDER_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(LogLevel.INFO, description="Root logging level")
    log_format: LogFormat = Field(
        LogFormat.CONSOLE, description="Pretty console or structured JSON logs"
    )
    output: OutputFormat = Field(
        OutputFormat.PRETTY, description="Render metadata as 'pretty' text or 'json'"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("log_format", "output", mode="before")
    @classmethod
    def _lower_choice(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def load_settings(**overrides: Any) -> BuilderSettings:
    """Build settings from the environment with ``overrides`` taking precedence.

    ``None`` overrides are dropped so unset CLI options fall through to the
    environment and then to defaults.
    """

    explicit = {key: value for key, value in overrides.items() if value is not None}
    return BuilderSettings(**explicit)
