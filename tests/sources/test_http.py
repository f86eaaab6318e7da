"""Tests for HttpChannelSource against an httpx MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from modelsync.contracts.exceptions import FetchError, UpdateError
from modelsync.sources.http import HttpChannelSource


def _source(handler) -> HttpChannelSource:  # type: ignore[no-untyped-def]
    return HttpChannelSource(
        base_url="http://upstream.test/",
        headers={"Authorization": "Bearer admin"},
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_fetch_models_returns_data_list() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True, "message": "", "data": ["gpt-4", "gpt-4o"]})

    async with _source(handler) as source:
        models = await source.fetch_models(7)

    assert models == ["gpt-4", "gpt-4o"]
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api/channel/fetch_models/7"
    assert seen[0].headers["Authorization"] == "Bearer admin"


@pytest.mark.asyncio
async def test_fetch_models_treats_null_data_as_empty() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": True, "data": None})

    async with _source(handler) as source:
        assert await source.fetch_models(1) == []


@pytest.mark.asyncio
async def test_fetch_models_unsuccessful_envelope_raises_with_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "message": "invalid key"})

    async with _source(handler) as source:
        with pytest.raises(FetchError, match="invalid key") as exc_info:
            await source.fetch_models(3)

    assert exc_info.value.channel_id == 3


@pytest.mark.asyncio
async def test_http_error_prefers_body_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"success": False, "message": "upstream exploded"})

    async with _source(handler) as source:
        with pytest.raises(FetchError, match="upstream exploded"):
            await source.fetch_models(3)


@pytest.mark.asyncio
async def test_http_error_without_body_reports_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>bad gateway</html>")

    async with _source(handler) as source:
        with pytest.raises(FetchError, match="HTTP 502"):
            await source.fetch_models(3)


@pytest.mark.asyncio
async def test_transport_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _source(handler) as source:
        with pytest.raises(FetchError, match="connection refused"):
            await source.fetch_models(3)


@pytest.mark.asyncio
async def test_malformed_model_list_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": True, "data": {"models": []}})

    async with _source(handler) as source:
        with pytest.raises(FetchError, match="Malformed"):
            await source.fetch_models(3)


@pytest.mark.asyncio
async def test_update_models_sends_comma_joined_list() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True, "message": ""})

    async with _source(handler) as source:
        await source.update_models(5, ["a", "b", "c"])

    assert seen[0].method == "PUT"
    assert seen[0].url.path == "/api/channel/"
    assert json.loads(seen[0].content) == {"id": 5, "models": "a,b,c"}


@pytest.mark.asyncio
async def test_update_models_rejection_raises_update_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "message": "channel not found"})

    async with _source(handler) as source:
        with pytest.raises(UpdateError, match="channel not found"):
            await source.update_models(5, ["a"])


@pytest.mark.asyncio
async def test_get_channel_parses_snapshot() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/channel/9"
        return httpx.Response(
            200,
            json={
                "success": True,
                "data": {
                    "id": 9,
                    "name": "openai-main",
                    "models": "gpt-4,gpt-4o",
                    "model_mapping": '{"fast": "gpt-4o-mini"}',
                    "status": 1,
                },
            },
        )

    async with _source(handler) as source:
        channel = await source.get_channel(9)

    assert channel.name == "openai-main"
    assert channel.models == ["gpt-4", "gpt-4o"]
    assert channel.model_mapping == '{"fast": "gpt-4o-mini"}'


@pytest.mark.asyncio
async def test_calls_outside_context_raise() -> None:
    source = _source(lambda request: httpx.Response(200))

    with pytest.raises(UpdateError, match="outside"):
        await source.update_models(1, [])
