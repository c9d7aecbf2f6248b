import importlib
from types import SimpleNamespace

import pytest

from config import env_flag, env_hours, get_settings_module
from src.timesheet.timesheet.accounting.model import AccountingPolicy
from src.timesheet.timesheet.core.exceptions import ConfigurationError


def test_policy_from_settings():
    settings = SimpleNamespace(THRESHOLD_HOURS=7.5, STANDARD_DAILY_HOURS="8", ABSENT_DAY_IMPLICIT_VACATION=True)
    policy = AccountingPolicy.from_settings(settings)
    assert policy.threshold_hours == 7.5
    assert policy.standard_daily_hours == 8.0
    assert policy.absent_day_implicit_vacation is True


def test_policy_refuses_missing_threshold():
    with pytest.raises(ConfigurationError):
        AccountingPolicy.from_settings(SimpleNamespace(STANDARD_DAILY_HOURS=8))


def test_policy_refuses_non_positive_standard_hours():
    with pytest.raises(ConfigurationError):
        AccountingPolicy(threshold_hours=8, standard_daily_hours=0)


def test_settings_module_selection(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "testing")
    assert get_settings_module() == "config.testing"
    monkeypatch.setenv("APP_ENV", "whatever")
    assert get_settings_module() == "config.development"


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("THRESHOLD_HOURS", "7.5")
    monkeypatch.setenv("ABSENT_DAY_IMPLICIT_VACATION", "si")
    monkeypatch.delenv("STANDARD_DAILY_HOURS", raising=False)
    assert env_hours("THRESHOLD_HOURS") == 7.5
    assert env_hours("STANDARD_DAILY_HOURS") is None
    assert env_hours("STANDARD_DAILY_HOURS", 8) == 8
    assert env_flag("ABSENT_DAY_IMPLICIT_VACATION") is True


def test_malformed_hours_in_environment_fail_with_configuration_error(monkeypatch):
    monkeypatch.setenv("THRESHOLD_HOURS", "abc")
    monkeypatch.setenv("STANDARD_DAILY_HOURS", "8")
    assert env_hours("THRESHOLD_HOURS") == "abc"

    import config.production as production

    settings = importlib.reload(production)
    with pytest.raises(ConfigurationError, match="THRESHOLD_HOURS non valido"):
        AccountingPolicy.from_settings(settings)
