from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of CLI preferences as JSON in the user data
directory, with default fallback on missing or corrupted files.
"""

import logging
import os
from typing import Any, Dict, Optional

from variantstock.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_CRITICAL_RATIO
from variantstock.infra.fs import get_user_data_dir, read_json_file, write_json_file

logger = logging.getLogger(__name__)

CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,

        # Rendering
        "show_total": True,
        "compact": False,

        # Ingestion
        "strict": False,

        # Low stock
        "critical_ratio": DEFAULT_CRITICAL_RATIO,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Args:
        path: Config file location. Defaults to CONFIG_FILE.

    Returns:
        Dict[str, Any]: Stored values merged over defaults; plain defaults on failure.
    """
    target = path or CONFIG_FILE
    defaults = get_default_config()

    if not os.path.exists(target):
        logger.debug(f"No config file at {target}. Using defaults.")
        return defaults

    try:
        data = read_json_file(target)
    except (OSError, ValueError) as e:
        logger.warning(f"Config file '{target}' unreadable ({e}). Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning(f"Config file '{target}' does not hold an object. Using defaults.")
        return defaults

    merged = dict(defaults)
    merged.update(data)
    return merged


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the configuration to disk.

    Returns:
        bool: True on success, False if the file could not be written.
    """
    target = path or CONFIG_FILE
    try:
        write_json_file(target, cfg)
        logger.info(f"Configuration saved to {target}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration to '{target}': {e}")
        return False
