"""Retry, rate limit and timeout settings of resilient HTTP clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx
from httpx_retries import Retry

if TYPE_CHECKING:
    from collections.abc import Mapping

RETRYABLE_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})
RETRYABLE_EXCEPTIONS: tuple[type[httpx.HTTPError], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)
# Asset downloads are reads; nothing else is ever retried.
IDEMPOTENT_METHODS = ("GET", "HEAD")


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Retries with exponential backoff; ``total=0`` disables retrying."""

    total: int = 3
    backoff_factor: float = 0.5
    max_backoff_wait: float = 30.0
    status_forcelist: frozenset[int] = RETRYABLE_STATUS_CODES

    def build(self) -> Retry:
        return Retry(
            total=self.total,
            backoff_factor=self.backoff_factor,
            max_backoff_wait=self.max_backoff_wait,
            allowed_methods=IDEMPOTENT_METHODS,
            status_forcelist=tuple(sorted(self.status_forcelist)),
            retry_on_exceptions=RETRYABLE_EXCEPTIONS,
        )


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    follow_redirects: bool = True
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    default_headers: Mapping[str, str] | None = None
