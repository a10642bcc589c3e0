"""MD5 checksums of remote audio and artwork assets over HTTP."""

from __future__ import annotations

import hashlib
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter

from ernkit.config.checksum import get_checksum_config

from .http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from ernkit.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class ChecksumError(RuntimeError):
    """Raised when an asset cannot be downloaded for hashing."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Cannot hash {url}: {reason}")


class HttpChecksumService:
    """Streams an asset and returns the hex MD5 digest of its body.

    One client is opened per call, so independent assets can be hashed
    concurrently without sharing connection state. The rate limit is owned
    by the service and spans every call, however many run at once.
    """

    def __init__(
        self,
        config: ResilienceConfig | None = None,
        *,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        config = config or get_checksum_config()
        ratelimit = config.ratelimit
        self._limiter = (
            AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds) if ratelimit else None
        )
        # Clients are built without their own limiter; the shared one above applies.
        self._config = replace(config, ratelimit=None)
        self._client_factory = client_factory or ResilientClient

    async def compute_md5(self, url: str) -> str:
        digest = hashlib.md5()  # noqa: S324
        size = 0
        if self._limiter is not None:
            await self._limiter.acquire()
        async with self._client_factory(self._config) as client:
            try:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()
                    async for chunk in response.aiter_bytes():
                        digest.update(chunk)
                        size += len(chunk)
            except httpx.HTTPStatusError as exc:
                raise ChecksumError(url, f"HTTP {exc.response.status_code}") from exc
            except httpx.HTTPError as exc:
                raise ChecksumError(url, str(exc) or type(exc).__name__) from exc
        log.debug("Hashed %s (%d bytes)", url, size)
        return digest.hexdigest()
