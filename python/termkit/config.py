"""Configuration loader for termkit.

Loads defaults from termkit.json at project root or the working directory,
with hardcoded fallbacks.

Example termkit.json:
    {
        "defaults": {
            "timezone": "utc",
            "similarity_threshold": 0.7
        }
    }
"""

import json
import logging
from pathlib import Path
from typing import Any

from .dates import FORMAT_DATE_ISO

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "termkit.json"

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "date_format": FORMAT_DATE_ISO,
    "timezone": "local",
    "similarity_threshold": 0.5,
    "comment_prefix": "#",
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find termkit.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / CONFIG_FILENAME,  # python/termkit -> root
        Path.cwd() / CONFIG_FILENAME,
        Path.cwd().parent / CONFIG_FILENAME,
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def load() -> dict[str, Any]:
    """Load configuration from termkit.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path, encoding="utf-8") as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring %s: %s", config_path, e)

    # Fallback
    _config = {"defaults": dict(FALLBACK_DEFAULTS)}
    return _config


def reload() -> dict[str, Any]:
    """Drop the cached configuration and load it again."""
    global _config
    _config = None
    return load()


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_date_format() -> str:
    return get_default("date_format", FALLBACK_DEFAULTS["date_format"])


def default_timezone() -> str:
    return get_default("timezone", FALLBACK_DEFAULTS["timezone"])


def default_similarity_threshold() -> float:
    return float(
        get_default("similarity_threshold", FALLBACK_DEFAULTS["similarity_threshold"])
    )


def default_comment_prefix() -> str:
    return get_default("comment_prefix", FALLBACK_DEFAULTS["comment_prefix"])
