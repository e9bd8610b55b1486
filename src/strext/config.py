from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _env_int(name: str, default: str) -> int:
    value = os.getenv(name, default)
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Parsed per instance so a bad value fails when settings are built, not at import.
    wildcard_cache_size: int = field(
        default_factory=lambda: _env_int("STREXT_WILDCARD_CACHE_SIZE", "256")
    )


def get_settings() -> Settings:
    return Settings()


def validate_settings(settings: Settings) -> Settings:
    """Reject settings that would break logging setup or the pattern cache.

    Error messages name the environment variable so a misconfigured host
    can be fixed without reading the code.
    """
    if str(settings.log_level).strip().upper() not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, "
            f"got {settings.log_level!r}"
        )
    if settings.wildcard_cache_size < 0:
        raise ValueError("STREXT_WILDCARD_CACHE_SIZE must be >= 0")
    return settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = validate_settings(settings or get_settings())
    logging.basicConfig(level=settings.log_level.strip().upper())
