"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from core_structures.config import Settings


def test_defaults():
    config = Settings(_env_file=None)
    assert config.log_level == "INFO"
    assert config.log_json is True
    assert config.enable_metrics is True
    assert config.lru_default_capacity == 1000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CORE_STRUCTURES_LRU_DEFAULT_CAPACITY", "64")
    monkeypatch.setenv("CORE_STRUCTURES_ENABLE_METRICS", "false")
    monkeypatch.setenv("core_structures_log_level", "DEBUG")
    config = Settings(_env_file=None)
    assert config.lru_default_capacity == 64
    assert config.enable_metrics is False
    assert config.log_level == "DEBUG"


def test_unprefixed_variables_are_ignored(monkeypatch):
    monkeypatch.setenv("LRU_DEFAULT_CAPACITY", "3")
    assert Settings(_env_file=None).lru_default_capacity == 1000


@pytest.mark.parametrize("capacity", ["0", "-5"])
def test_non_positive_default_capacity_fails_at_load(monkeypatch, capacity):
    monkeypatch.setenv("CORE_STRUCTURES_LRU_DEFAULT_CAPACITY", capacity)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
