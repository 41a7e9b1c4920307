"""Centralized configuration for SkimQ.

Typed constants for the summary pipeline, batching, and the API surface.
Environment variable overrides use safe defaults so the library works with
no env configuration at all; malformed values fall back to the default with
a warning.
"""

from __future__ import annotations

import os

from skimq.observability.logging import get_logger

logger = get_logger(__name__)


def _get_env_bool(key: str, default: bool) -> bool:
    """
    Get boolean from environment variable.

    Returns:
        True for "true"/"1"/"yes", False for "false"/"0"/"no", default otherwise
    """
    value = os.getenv(key)
    if value is None:
        return default

    value_lower = value.strip().lower()
    if value_lower in ("true", "1", "yes"):
        return True
    if value_lower in ("false", "0", "no"):
        return False

    logger.warning("Invalid boolean for %s: %r, using default %s", key, value, default)
    return default


def _get_env_int(key: str, default: int | None) -> int | None:
    """
    Get integer from environment variable.

    An empty string or "none" maps to None (no limit).
    """
    value = os.getenv(key)
    if value is None:
        return default

    if value.strip().lower() in ("", "none"):
        return None

    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid integer for %s: %r, using default %s", key, value, default)
        return default


# --- App ---
APP_NAME: str = "SkimQ API"
APP_VERSION: str = "0.1.0"
APP_ENV: str = os.getenv("SKIMQ_ENV", "development")

# --- Summary Pipeline ---
# Optional cut-off applied before boilerplate filtering (None = whole input)
SUMMARY_MAX_INPUT_CHARS: int | None = _get_env_int("SKIMQ_MAX_INPUT_CHARS", None)
SUMMARY_STRIP_SOURCE_PREFIX: bool = _get_env_bool("SKIMQ_STRIP_SOURCE_PREFIX", False)

# --- Batch ---
BATCH_MAX_WORKERS: int = _get_env_int("SKIMQ_MAX_WORKERS", 4) or 4

# --- API ---
API_BATCH_SIZE_MAX: int = _get_env_int("SKIMQ_API_BATCH_SIZE_MAX", 100) or 100
API_TEXT_MAX_LENGTH: int = 50_000
API_SENDER_MAX_LENGTH: int = 320
API_HOST: str = os.getenv("SKIMQ_API_HOST", "127.0.0.1")
API_PORT: int = _get_env_int("SKIMQ_API_PORT", 8000) or 8000
