"""
Pytest configuration and shared fixtures.
"""
from datetime import datetime

import pytest

from convenia_util.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Drop cached settings and environment overrides between tests."""
    for name in (
        "CONVENIA_CURRENCY_PREFIX",
        "CONVENIA_DATE_OUTPUT_FORMAT",
        "CONVENIA_EMPTY_CHAR",
        "CONVENIA_INTERVAL_SEPARATOR",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fixed_now():
    """Reference moment for clock-dependent formatters."""
    return datetime(2017, 6, 15, 12, 0, 0)


class FakeRuleRegistry:
    """Records what a form validation registry receives."""

    def __init__(self):
        self.rules = {}

    def extend(self, name, rule):
        self.rules[name] = rule


@pytest.fixture
def rule_registry():
    return FakeRuleRegistry()
