from __future__ import annotations

"""
Configuration Domain Management.

Dict-based runtime settings: where the index snapshot lives and how the
logging subsystem is set up. Defaults may be overridden by an optional
``config.json`` in the user data directory, and the CLI overrides both.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from wordtracker.domain.constants import DEFAULT_LOG_LEVEL, DEFAULT_REPOSITORY_FILE
from wordtracker.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILENAME = "config.json"


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILENAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Persistence
        "repository_path": DEFAULT_REPOSITORY_FILE,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": None,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from disk merged over the defaults.

    Unknown keys are ignored. A missing file yields the defaults; an
    unreadable or malformed one is logged and also yields the defaults.

    Args:
        path: Explicit config file; defaults to ``config.json`` in the
              user data directory.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config
