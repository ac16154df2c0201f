"""
Arrata - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from arrata.config.settings import get_settings
from arrata.engine.base import Quality, Stat


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Keep ARRATA_* environment and the settings cache out of every test."""
    for var in ("ARRATA_DEBUG", "ARRATA_LOG_LEVEL", "ARRATA_MAX_DICE_PER_ROLL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# STAT NOTATION TEST DATA
# =============================================================================

@pytest.fixture
def stat_notations() -> dict[str, tuple[str, Quality, int]]:
    """
    Stat notation strings with the quality and quantity they parse to.

    Returns:
        Dict mapping name to (notation, expected_quality, expected_quantity)
    """
    return {
        "basic": ("B4", Quality.BASIC, 4),
        "adept": ("A3", Quality.ADEPT, 3),
        "superb": ("S10", Quality.SUPERB, 10),
        "lowercase_adept": ("a2", Quality.ADEPT, 2),
        "lowercase_superb": ("s7", Quality.SUPERB, 7),
        "lowercase_basic": ("b5", Quality.BASIC, 5),
        "unknown_code": ("X6", Quality.BASIC, 6),
        "digit_code": ("96", Quality.BASIC, 6),
        "zero_quantity": ("A0", Quality.ADEPT, 0),
        "missing_quantity": ("S", Quality.SUPERB, 1),
        "garbage_quantity": ("Aabc", Quality.ADEPT, 1),
        "negative_quantity": ("B-3", Quality.BASIC, 1),
        "trailing_space": ("A3 ", Quality.ADEPT, 1),
    }


# =============================================================================
# STAT FIXTURES
# =============================================================================

@pytest.fixture
def b4() -> Stat:
    return Stat(quality=Quality.BASIC, quantity=4)


@pytest.fixture
def a8() -> Stat:
    return Stat(quality=Quality.ADEPT, quantity=8)


@pytest.fixture
def s10() -> Stat:
    return Stat(quality=Quality.SUPERB, quantity=10)
