"""Channel source backed by the upstream admin HTTP API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from modelsync.contracts.channel import Channel, join_models
from modelsync.contracts.exceptions import ChannelSourceError, FetchError, UpdateError
from modelsync.contracts.source import ChannelSource

_LOG = logging.getLogger(__name__)

_MODELS_ADAPTER: TypeAdapter[list[str]] = TypeAdapter(list[str])


class ApiEnvelope(BaseModel):
    """Response wrapper used by every admin endpoint."""

    success: bool = False
    message: str = ""
    data: Any = None


class HttpChannelSource(ChannelSource):
    """Reads channels and writes model lists over HTTP.

    Use as an async context manager so the underlying client is closed::

        async with HttpChannelSource(base_url="http://localhost:3000") as source:
            models = await source.fetch_models(7)
    """

    def __init__(
        self,
        *,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = dict(headers or {})
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> HttpChannelSource:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_channel(self, channel_id: int) -> Channel:
        envelope = await self._request("GET", f"/api/channel/{channel_id}", channel_id=channel_id, error=FetchError)
        if not envelope.success:
            raise FetchError(envelope.message or f"Channel {channel_id} not found", channel_id=channel_id)
        try:
            return Channel.model_validate(envelope.data)
        except ValidationError as exc:
            raise FetchError(f"Malformed channel payload for {channel_id}: {exc}", channel_id=channel_id) from exc

    async def fetch_models(self, channel_id: int) -> list[str]:
        envelope = await self._request(
            "GET", f"/api/channel/fetch_models/{channel_id}", channel_id=channel_id, error=FetchError
        )
        if not envelope.success:
            raise FetchError(envelope.message or "Failed to fetch models", channel_id=channel_id)
        try:
            return _MODELS_ADAPTER.validate_python(envelope.data or [])
        except ValidationError as exc:
            raise FetchError(f"Malformed model list for channel {channel_id}", channel_id=channel_id) from exc

    async def update_models(self, channel_id: int, models: list[str]) -> None:
        payload = {"id": channel_id, "models": join_models(models)}
        envelope = await self._request("PUT", "/api/channel/", channel_id=channel_id, error=UpdateError, json=payload)
        if not envelope.success:
            raise UpdateError(envelope.message or "Failed to update channel", channel_id=channel_id)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        channel_id: int,
        error: type[ChannelSourceError],
        json: dict[str, Any] | None = None,
    ) -> ApiEnvelope:
        if self._client is None:
            raise error("HttpChannelSource used outside of its async context", channel_id=channel_id)

        _LOG.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as exc:
            raise error(f"{method} {path} failed: {exc}", channel_id=channel_id) from exc

        envelope = self._parse_envelope(response)
        if response.is_error:
            message = envelope.message if envelope is not None and envelope.message else None
            raise error(message or f"{method} {path} returned HTTP {response.status_code}", channel_id=channel_id)
        if envelope is None:
            raise error(f"{method} {path} returned an unreadable response", channel_id=channel_id)
        return envelope

    @staticmethod
    def _parse_envelope(response: httpx.Response) -> ApiEnvelope | None:
        try:
            return ApiEnvelope.model_validate_json(response.content)
        except ValidationError:
            return None
