"""Shared logging helpers for ernkit."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "ERN_LOG_LEVEL"


def resolve_log_level(value: int | str | None = None) -> int:
    """Return a numeric log level from an int, a level name or ``ERN_LOG_LEVEL``."""

    if isinstance(value, int):
        return value
    name = value if value is not None else os.getenv(LOG_LEVEL_ENV_VAR, "INFO")
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def configure_logging(*, level: int | str | None = None, force: bool = False) -> None:
    """Initialise the root logger once with a terse format suitable for CLI output.

    ``level`` falls back to ``ERN_LOG_LEVEL`` and then INFO. Pass ``force=True`` to
    reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
