"""Application configuration helpers."""

from __future__ import annotations

from .checksum import get_checksum_config
from .env import env_flag, env_float, optional_env_var, require_env_vars
from .ern import ErnSettings, get_ern_settings
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, resolve_log_level

__all__ = [
    "ConfigurationError",
    "ErnSettings",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "env_flag",
    "env_float",
    "get_checksum_config",
    "get_ern_settings",
    "optional_env_var",
    "require_env_vars",
    "resolve_log_level",
]
