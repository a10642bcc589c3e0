"""Asset download configuration for checksum computation."""

from __future__ import annotations

from .env import env_float
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

CHECKSUM_TIMEOUT_SECONDS = 60.0


def get_checksum_config(*, ratelimit: RateLimit | None = None) -> ResilienceConfig:
    """Resilience settings for fetching audio and artwork before hashing them.

    Assets are large, so retries are kept short and the per-request timeout
    follows ``ERN_CHECKSUM_TIMEOUT_SECONDS``.
    """

    return ResilienceConfig(
        name="checksum",
        timeout_seconds=env_float("ERN_CHECKSUM_TIMEOUT_SECONDS", default=CHECKSUM_TIMEOUT_SECONDS),
        retry=RetryPolicy(total=2, max_backoff_wait=10.0),
        ratelimit=ratelimit or RateLimit(max_calls=8, per_seconds=1.0),
    )
