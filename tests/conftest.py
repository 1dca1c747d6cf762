"""
Shared pytest fixtures.
"""

import logging

import pytest

from ssm_param_resolver.core.models import ParameterType
from ssm_param_resolver.shared.config import Config
from ssm_param_resolver.shared.utils.logger import PACKAGE_LOGGER
from tests.fixtures import FakeParameterStore


@pytest.fixture
def fake_store():
    """Store holding a plain, a list and a secure parameter."""
    return FakeParameterStore(
        {
            "/app/db/host": "10.0.0.5",
            "/app/db/port": "5432",
            "/app/hosts": ("a.example.com,b.example.com", ParameterType.STRING_LIST),
            "/app/db/password": ("s3cr3t", ParameterType.SECURE_STRING),
        }
    )


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Config singleton loaded from an empty working directory and home."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Config, "_instance", None)
    yield tmp_path
    Config._instance = None


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """Keep log levels set by CLI commands from leaking between tests."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield
    package_logger.setLevel(level)
