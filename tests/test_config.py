"""
Tests for Settings loading and validation.
"""

import pytest
from pydantic import ValidationError

from app.config import Environment, Settings


def test_environment_and_log_level_are_normalized():
    s = Settings(_env_file=None, environment="PRODUCTION", log_level="debug")

    assert s.environment == Environment.PRODUCTION
    assert s.is_production()
    assert s.log_level == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_test_run_uses_in_memory_store_without_seeding():
    s = Settings(_env_file=None)

    assert s.database_url == "sqlite://"
    assert s.seed_on_startup is False
    assert s.environment == Environment.TESTING
