"""Shared fixtures for the Ident Engine test suite."""

from datetime import date

import pytest

from ident_engine import validation_config
from ident_engine.checks.validators import calc_check_digit

# Fixed reference date so ages and centuries don't drift with the calendar
TODAY = date(2026, 10, 17)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the global config at a throwaway file instead of ~/.ident_engine."""
    config = validation_config.ValidationConfig(tmp_path / "config.json")
    monkeypatch.setattr(validation_config, "_config_instance", config)
    return config


@pytest.fixture
def today():
    return TODAY


def with_check_digit(digits: str) -> str:
    """Append the Luhn check digit to a digit string."""
    return digits + calc_check_digit(digits)


def broken_check_digit(digits: str) -> str:
    """Append a check digit that is guaranteed to be wrong."""
    good = int(calc_check_digit(digits))
    return digits + str((good + 1) % 10)
