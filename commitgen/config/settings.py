"""Configuration settings for commitgen."""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Invalid configuration value."""

    pass


def _parse_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Config:
    """Main configuration settings."""

    max_files_in_body: int = 20
    include_footer: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        # Values already in the environment win over the .env file
        load_dotenv(dotenv_path=Path.cwd() / ".env")
        return cls(
            max_files_in_body=_parse_int("COMMITGEN_MAX_FILES_IN_BODY", 20),
            include_footer=_parse_bool("COMMITGEN_INCLUDE_FOOTER", False),
        )

    def override(
        self, max_files_in_body: int | None = None, include_footer: bool | None = None
    ) -> "Config":
        """Return a copy with command line values applied."""
        changes = {}
        if max_files_in_body is not None:
            changes["max_files_in_body"] = max_files_in_body
        if include_footer is not None:
            changes["include_footer"] = include_footer
        return replace(self, **changes)
