"""Shared test fixtures."""
import pytest
import structlog

from decimal_formats.config import Settings
from decimal_formats.models.decimal_format import DecimalFormat


@pytest.fixture
def settings(monkeypatch):
    """Settings built from a clean environment."""
    for name in ("LOG_LEVEL", "OUTPUT_POINT", "OUTPUT_GROUP", "OUTPUT_STANDARD"):
        monkeypatch.delenv(f"DECFORMAT_{name}", raising=False)
    return Settings()


@pytest.fixture
def indian_format():
    """12,34,567.89 style."""
    return DecimalFormat(point=".", group=",", standard=False)


@pytest.fixture
def reset_logging():
    """Restore structlog's default configuration after the test."""
    yield
    structlog.reset_defaults()
