"""
Call configuration utilities.

Usage:
    from callroster.config import load_call_config

    config = load_call_config("team_call")
"""

from callroster.config.loader import load_call_config, get_config_path

__all__ = ["load_call_config", "get_config_path"]
