from __future__ import annotations

import asyncio

import httpx

from kancolle_a.adapters.http_resilience import (
    RateLimit,
    ResilienceConfig,
    ResilientClient,
    RetryPolicy,
    build_retry,
)


def test_build_retry_copies_policy() -> None:
    retry = build_retry(RetryPolicy(total=5, status_forcelist=frozenset({503})))

    assert retry.total == 5


def test_resilient_client_retries_server_errors() -> None:
    statuses = iter([503, 200])
    hooked: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(next(statuses), text=request.url.path)

    def hook(response: httpx.Response) -> None:
        hooked.append(response.status_code)

    config = ResilienceConfig(
        name="test",
        base_url="https://example.invalid/api/",
        retry=RetryPolicy(backoff_factor=0.0, backoff_jitter=0.0),
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        response_hooks=(hook,),
    )

    async def run() -> httpx.Response:
        async with ResilientClient(
            config, cookies={"JSESSIONID": "abc"}, transport=httpx.MockTransport(handler)
        ) as client:
            assert client.cookies["JSESSIONID"] == "abc"
            return await client.get("TcBook/info")

    response = asyncio.run(run())

    assert response.status_code == 200
    assert response.text == "/api/TcBook/info"
    assert hooked == [200]
