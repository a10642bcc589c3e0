"""Sender identity and generation defaults."""

from __future__ import annotations

from dataclasses import dataclass

from ernkit.domain.model.enums import ErnVersion

from .env import env_flag, env_float, optional_env_var, require_env_vars
from .errors import ConfigurationError

DEFAULT_ERN_VERSION = ErnVersion.V43
DEFAULT_CHECKSUM_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class ErnSettings:
    """Holds the values every generated message shares."""

    sender_party_id: str
    sender_name: str
    default_version: ErnVersion = DEFAULT_ERN_VERSION
    test_mode: bool = False
    checksum_timeout_seconds: float = DEFAULT_CHECKSUM_TIMEOUT_SECONDS


def get_ern_settings() -> ErnSettings:
    values = require_env_vars(("ERN_SENDER_PARTY_ID", "ERN_SENDER_NAME"))
    raw_version = optional_env_var("ERN_DEFAULT_VERSION", DEFAULT_ERN_VERSION.value)
    try:
        version = ErnVersion.parse(raw_version)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid ERN_DEFAULT_VERSION: {raw_version}") from exc
    return ErnSettings(
        sender_party_id=values["ERN_SENDER_PARTY_ID"],
        sender_name=values["ERN_SENDER_NAME"],
        default_version=version,
        test_mode=env_flag("ERN_TEST_MODE"),
        checksum_timeout_seconds=env_float(
            "ERN_CHECKSUM_TIMEOUT_SECONDS", default=DEFAULT_CHECKSUM_TIMEOUT_SECONDS
        ),
    )
