from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

# Environment variable naming the zone used by `Time.format_local` instead of the process zone
LOCAL_TIMEZONE_ENV = "SUITE_VALUES_LOCAL_TIMEZONE"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings for rendering values.

    Attributes:
        local_timezone: IANA identifier used as the "local" zone, or None for the process zone.
    """

    local_timezone: str | None = None


def read_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build `Settings` from $environ (defaults to `os.environ`) without touching any cache."""
    environ = os.environ if environ is None else environ
    local_timezone = environ.get(LOCAL_TIMEZONE_ENV, "").strip() or None
    return Settings(local_timezone=local_timezone)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load `.env` from the working directory (or its parents) once and return the cached `Settings`.

    Variables already set in the environment win over values from `.env`.
    """
    load_dotenv(find_dotenv(usecwd=True))
    settings = read_settings()
    logger.debug(f"Loaded settings: {settings}")
    return settings
