"""Shared fixtures."""

import pytest
import structlog
from prometheus_client import REGISTRY

from core_structures.config import settings


@pytest.fixture
def metrics_enabled(monkeypatch):
    """Force metric recording on for the duration of a test."""
    monkeypatch.setattr(settings, "enable_metrics", True)


@pytest.fixture
def sample_value():
    """Read a sample from the default registry, treating absent samples as 0."""
    def _read(name: str, labels: dict) -> float:
        return REGISTRY.get_sample_value(name, labels) or 0.0
    return _read


@pytest.fixture
def restore_structlog():
    """Put back whatever structlog configuration was active before the test."""
    saved = structlog.get_config()
    yield
    structlog.configure(**saved)
