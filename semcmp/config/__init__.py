"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, get_log_level, get_environment

__all__ = [
    "ConfigManager",
    "Config",
    "get_log_level",
    "get_environment",
]
