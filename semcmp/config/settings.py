"""
Settings
Configuration management for semcmp.

Values come from the environment; a `.env` file in the working directory is
loaded first without overriding variables that are already set.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


DEFAULT_LOG_LEVEL = "WARNING"
PRODUCTION_LOG_LEVEL = "ERROR"


def get_environment() -> str:
    """Get the deployment environment (development or production)."""
    return os.getenv("ENVIRONMENT", "development")


def get_log_level(environment: Optional[str] = None) -> str:
    """
    Get the configured log level.

    Priority:
    1. SEMCMP_LOG_LEVEL env var
    2. LOG_LEVEL env var
    3. ERROR in production, WARNING otherwise
    """
    level = os.getenv("SEMCMP_LOG_LEVEL") or os.getenv("LOG_LEVEL")
    if level:
        return level.upper()
    env = environment if environment is not None else get_environment()
    if env == "production":
        return PRODUCTION_LOG_LEVEL
    return DEFAULT_LOG_LEVEL


@dataclass
class Config:
    """Runtime configuration."""
    environment: str = "development"
    log_level: str = DEFAULT_LOG_LEVEL


class ConfigManager:
    """Configuration manager - loads and provides config."""

    _instance: Optional["ConfigManager"] = None

    def __init__(self):
        self._config: Optional[Config] = None

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self, dotenv: bool = True) -> Config:
        """Load configuration from environment."""
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        env = get_environment()
        self._config = Config(
            environment=env,
            log_level=get_log_level(env),
        )
        return self._config

    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config()
        return self._config
