from __future__ import annotations

import asyncio
import hashlib
import time
from collections.abc import Callable  # noqa: TC003

import httpx
import pytest

from ernkit.adapters.checksum import ChecksumError, HttpChecksumService
from ernkit.adapters.http_resilience import ResilientClient
from ernkit.config import RateLimit, ResilienceConfig
from ernkit.domain.ports import ChecksumService

ASSET_URL = "https://cdn.example.com/audio/1.wav"
CONFIG = ResilienceConfig(name="checksum-test", timeout_seconds=5.0)


def _make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(async_handler))  # noqa: SLF001  # type: ignore[reportPrivateUsage]
        return client

    return factory


def test_service_satisfies_checksum_port() -> None:
    assert isinstance(HttpChecksumService(CONFIG), ChecksumService)


def test_compute_md5_hashes_response_body() -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, content=b"hello")

    service = HttpChecksumService(CONFIG, client_factory=_make_client_factory(handler))

    digest = asyncio.run(service.compute_md5(ASSET_URL))

    assert digest == "5d41402abc4b2a76b9719d911017c592"
    assert requested == [ASSET_URL]


def test_compute_md5_hashes_large_bodies() -> None:
    body = bytes(range(256)) * 4096

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body)

    service = HttpChecksumService(CONFIG, client_factory=_make_client_factory(handler))

    expected = hashlib.md5(body).hexdigest()  # noqa: S324
    assert asyncio.run(service.compute_md5(ASSET_URL)) == expected


def test_http_errors_become_checksum_errors() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="gone")

    service = HttpChecksumService(CONFIG, client_factory=_make_client_factory(handler))

    with pytest.raises(ChecksumError, match="HTTP 404") as excinfo:
        asyncio.run(service.compute_md5(ASSET_URL))

    assert excinfo.value.url == ASSET_URL
    assert str(excinfo.value) == f"Cannot hash {ASSET_URL}: HTTP 404"


def test_transport_errors_become_checksum_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    service = HttpChecksumService(CONFIG, client_factory=_make_client_factory(handler))

    with pytest.raises(ChecksumError, match="connection refused"):
        asyncio.run(service.compute_md5(ASSET_URL))


def test_transport_is_injected_below_retry_layer() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["X-Client"] == "ernkit"
        return httpx.Response(200, content=b"")

    config = ResilienceConfig(
        name="checksum-test",
        default_headers={"X-Client": "ernkit"},
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
    )

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(handler))

    service = HttpChecksumService(config, client_factory=factory)

    assert asyncio.run(service.compute_md5(ASSET_URL)) == "d41d8cd98f00b204e9800998ecf8427e"


def test_resilient_client_get_uses_base_url() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"ok": True})

    config = ResilienceConfig(name="catalog", base_url="https://catalog.example.com")

    async def fetch() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.get("/releases/rel-001")

    response = asyncio.run(fetch())

    assert response.json() == {"ok": True}
    assert seen == ["https://catalog.example.com/releases/rel-001"]


def test_rate_limit_is_shared_across_concurrent_downloads() -> None:
    started: list[float] = []
    configs: list[ResilienceConfig] = []

    def handler(_: httpx.Request) -> httpx.Response:
        started.append(time.monotonic())
        return httpx.Response(200, content=b"chunk")

    inner_factory = _make_client_factory(handler)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        configs.append(resilience)
        return inner_factory(resilience)

    config = ResilienceConfig(
        name="checksum-test",
        ratelimit=RateLimit(max_calls=1, per_seconds=0.3),
    )
    service = HttpChecksumService(config, client_factory=factory)

    async def fan_out() -> list[str]:
        urls = [f"https://cdn.example.com/audio/{n}.wav" for n in range(1, 4)]
        return await asyncio.gather(*(service.compute_md5(url) for url in urls))

    digests = asyncio.run(fan_out())

    assert len(digests) == 3
    assert len(started) == 3
    assert max(started) - min(started) >= 0.45
    assert all(resilience.ratelimit is None for resilience in configs)
