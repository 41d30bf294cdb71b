"""Configuration utilities for infrastructure layer."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env first (default environment variables)
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-case level from LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def _optional_path(var_name: str) -> Optional[Path]:
    value = os.getenv(var_name, "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def get_keywords_file() -> Optional[Path]:
    """
    Get the keyword table override.

    Returns:
        Path from HEALTH_PLAN_KEYWORDS_FILE, or None to use the bundled table
    """
    return _optional_path("HEALTH_PLAN_KEYWORDS_FILE")


def get_substitutions_file() -> Optional[Path]:
    """
    Get the substitution rules override.

    Returns:
        Path from HEALTH_PLAN_SUBSTITUTIONS_FILE, or None to use the bundled rules
    """
    return _optional_path("HEALTH_PLAN_SUBSTITUTIONS_FILE")
