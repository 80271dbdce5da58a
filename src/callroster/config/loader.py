"""
Call configuration management utilities.

This module provides functions to load per-call settings from a YAML
configuration file at the project root.
"""

import logging
import os
import yaml
from pathlib import Path

from callroster.runtime.types import VALID_LOG_LEVELS, CallConfig

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """
    Get the path to the call configuration file.

    Looks for call_config.yaml in the current working directory (project root).
    """
    return Path(os.getcwd()) / "call_config.yaml"


def load_call_config(call_key: str) -> CallConfig:
    """
    Load call settings from YAML file at project root.

    Args:
        call_key: The key identifying the call in the config file

    Returns:
        CallConfig with room_token and log_level

    Raises:
        FileNotFoundError: If call_config.yaml doesn't exist
        ValueError: If the call is missing or log_level is not a logging level
        RuntimeError: If the file cannot be read or parsed
    """
    config_path = get_config_path()
    logger.debug(f"Loading config from: {config_path}")

    if not config_path.exists():
        raise FileNotFoundError(
            f"call_config.yaml not found at {config_path}. "
            "Copy call_config.yaml.example to call_config.yaml and configure your calls."
        )

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}

        call_config = config.get(call_key, {})

        if not call_config:
            raise ValueError(
                f"Call '{call_key}' not found in {config_path}. "
                f"Please add the call configuration."
            )

        log_level = str(call_config.get("log_level", "INFO")).upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{log_level}' for call '{call_key}'. "
                f"Expected one of: {', '.join(VALID_LOG_LEVELS)}"
            )

        return CallConfig(
            room_token=str(call_config.get("room_token", "")),
            log_level=log_level,
        )
    except ValueError:
        raise
    except Exception as e:
        raise RuntimeError(f"Error loading call config: {e}")
