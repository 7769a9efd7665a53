"""Tests for client settings and Config test mode"""

import pytest
from qchart import ConfigurationError, QuickchartClient
from qchart.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_URL_LENGTH,
    ClientSettings,
    Config,
    get_settings,
)


@pytest.fixture
def no_test_mode():
    """Read settings from the environment for the duration of a test"""
    Config.clear_test_mode()
    yield


def test_client_settings_defaults():
    settings = ClientSettings()
    assert settings.base_url == "https://quickchart.io"
    assert settings.timeout is None
    assert settings.max_url_length == 2000
    assert settings.log_level == "WARNING"


def test_client_settings_from_env(monkeypatch):
    monkeypatch.setenv("QCHART_BASE_URL", "http://localhost:3400")
    monkeypatch.setenv("QCHART_TIMEOUT", "7.5")
    monkeypatch.setenv("QCHART_MAX_URL_LENGTH", "8000")
    monkeypatch.setenv("QCHART_LOG_LEVEL", "debug")

    settings = ClientSettings.from_env()
    assert settings.base_url == "http://localhost:3400"
    assert settings.timeout == 7.5
    assert settings.max_url_length == 8000
    assert settings.log_level == "DEBUG"


def test_blank_env_values_use_defaults(monkeypatch):
    monkeypatch.setenv("QCHART_BASE_URL", "  ")
    monkeypatch.setenv("QCHART_TIMEOUT", "")

    settings = ClientSettings.from_env()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout is None


@pytest.mark.parametrize(
    "name, value",
    [
        ("QCHART_TIMEOUT", "soon"),
        ("QCHART_TIMEOUT", "-1"),
        ("QCHART_MAX_URL_LENGTH", "long"),
        ("QCHART_MAX_URL_LENGTH", "0"),
        ("QCHART_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_env_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        ClientSettings.from_env()


def test_test_mode_overrides_environment(monkeypatch):
    monkeypatch.setenv("QCHART_BASE_URL", "http://from-env")
    Config.set_test_mode(ClientSettings(base_url="http://from-test"))

    assert Config.is_test_mode()
    assert get_settings().base_url == "http://from-test"


def test_clear_test_mode_reads_environment(monkeypatch, no_test_mode):
    monkeypatch.setenv("QCHART_MAX_URL_LENGTH", "1234")

    assert not Config.is_test_mode()
    assert get_settings().max_url_length == 1234


def test_set_test_mode_without_settings_uses_defaults():
    Config.set_test_mode()
    assert get_settings() == ClientSettings()
    assert get_settings().max_url_length == DEFAULT_MAX_URL_LENGTH


def test_client_picks_up_env_base_url(monkeypatch, no_test_mode):
    monkeypatch.setenv("QCHART_BASE_URL", "https://charts.example.org")
    url = QuickchartClient().set_chart("{}").build_url()
    assert url.startswith("https://charts.example.org/chart?")


def test_explicit_settings_win_over_config():
    settings = ClientSettings(base_url="http://explicit")
    url = QuickchartClient(settings=settings).set_chart("{}").build_url()
    assert url.startswith("http://explicit/chart?")
