from __future__ import annotations

import logging

import pytest

from ernkit.config import (
    ConfigurationError,
    MissingConfigurationError,
    env_flag,
    get_checksum_config,
    get_ern_settings,
    require_env_vars,
    resolve_log_level,
)
from ernkit.domain.model import ErnVersion

SETTINGS_VARS = (
    "ERN_SENDER_PARTY_ID",
    "ERN_SENDER_NAME",
    "ERN_DEFAULT_VERSION",
    "ERN_TEST_MODE",
    "ERN_CHECKSUM_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in SETTINGS_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sender(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERN_SENDER_PARTY_ID", "PADPIDA2014120301")
    monkeypatch.setenv("ERN_SENDER_NAME", " Stardust Distribution ")


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    assert require_env_vars(["EXAMPLE_VAR"]) == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_lists_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLANK_VAR", "   ")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR", "BLANK_VAR"])

    assert exc.value.names == ("BLANK_VAR", "MISSING_VAR")
    assert str(exc.value) == "Missing configuration for: BLANK_VAR, MISSING_VAR"


@pytest.mark.usefixtures("sender")
def test_settings_defaults() -> None:
    settings = get_ern_settings()

    assert settings.sender_party_id == "PADPIDA2014120301"
    assert settings.sender_name == "Stardust Distribution"
    assert settings.default_version is ErnVersion.V43
    assert settings.test_mode is False
    assert settings.checksum_timeout_seconds == 60.0


@pytest.mark.usefixtures("sender")
def test_settings_read_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERN_DEFAULT_VERSION", "382")
    monkeypatch.setenv("ERN_TEST_MODE", "Yes")
    monkeypatch.setenv("ERN_CHECKSUM_TIMEOUT_SECONDS", "12.5")

    settings = get_ern_settings()

    assert settings.default_version is ErnVersion.V382
    assert settings.test_mode is True
    assert settings.checksum_timeout_seconds == 12.5


def test_settings_require_sender(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERN_SENDER_NAME", "Stardust Distribution")

    with pytest.raises(MissingConfigurationError, match="ERN_SENDER_PARTY_ID"):
        get_ern_settings()


@pytest.mark.usefixtures("sender")
@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("ERN_DEFAULT_VERSION", "5.0", "Invalid ERN_DEFAULT_VERSION: 5.0"),
        ("ERN_TEST_MODE", "maybe", "Invalid boolean for ERN_TEST_MODE"),
        ("ERN_CHECKSUM_TIMEOUT_SECONDS", "soon", "Invalid number"),
        ("ERN_CHECKSUM_TIMEOUT_SECONDS", "-3", "must be positive"),
    ],
)
def test_settings_reject_invalid_values(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str, message: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError, match=message):
        get_ern_settings()


def test_env_flag_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ERN_FLAG_FOR_TEST", raising=False)

    assert env_flag("ERN_FLAG_FOR_TEST") is False
    assert env_flag("ERN_FLAG_FOR_TEST", default=True) is True


def test_checksum_config_follows_timeout_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERN_CHECKSUM_TIMEOUT_SECONDS", "15")

    config = get_checksum_config()

    assert config.name == "checksum"
    assert config.timeout_seconds == 15.0
    assert config.retry.total == 2
    assert config.ratelimit is not None


def test_resolve_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERN_LOG_LEVEL", "warning")

    assert resolve_log_level() == logging.WARNING
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ConfigurationError, match="LOUD"):
        resolve_log_level("LOUD")
