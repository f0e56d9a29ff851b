"""
Shared pytest fixtures for semcmp tests.

Provides parsing helpers and environment isolation for config and CLI tests.
"""

import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from semcmp.config import ConfigManager
from semcmp.core import parse


# SemVer 2.0.0 section 11 example, lowest to highest precedence.
PRECEDENCE_CHAIN = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "1.0.1",
    "1.1.0",
    "2.0.0",
]

# Versions that share precedence with a chain entry but differ in build metadata.
BUILD_VARIANTS = [
    "1.0.0-alpha+001",
    "1.0.0-beta.11+exp.sha.5114f85",
    "1.0.0-rc.1+b",
    "1.0.0+a",
    "1.0.0+20130313144700",
    "2.0.0+build.1-aef",
]


@pytest.fixture
def v():
    """Parse a version string (shorthand used across comparator tests)."""
    return parse


@pytest.fixture
def precedence_chain():
    return [parse(raw) for raw in PRECEDENCE_CHAIN]


@pytest.fixture
def version_pool():
    """Chain entries plus build-metadata twins, so the pool holds equal pairs."""
    return [parse(raw) for raw in PRECEDENCE_CHAIN + BUILD_VARIANTS]


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """
    Run with no semcmp-related env vars and an empty working directory,
    so no stray .env file is picked up.
    """
    monkeypatch.chdir(tmp_path)
    keys = ("SEMCMP_LOG_LEVEL", "LOG_LEVEL", "ENVIRONMENT")
    env = {k: value for k, value in os.environ.items() if k not in keys}
    with patch.dict(os.environ, env, clear=True):
        yield tmp_path


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Drop the cached ConfigManager between tests."""
    ConfigManager._instance = None
    yield
    ConfigManager._instance = None


@pytest.fixture(autouse=True)
def reset_semcmp_logger():
    """
    Drop handlers on the package logger so each test's Logger binds to the
    sys.stderr that capsys installed for it.
    """
    package_logger = logging.getLogger("semcmp")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
