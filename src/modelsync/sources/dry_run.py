"""Dry-run channel source wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

from modelsync.contracts.channel import Channel, join_models
from modelsync.contracts.source import ChannelSource


@dataclass(frozen=True)
class DryRunOperation:
    """Deterministic dry-run operation log entry."""

    sequence: int
    name: str
    channel_id: int
    payload: dict[str, str]


class DryRunChannelSource(ChannelSource):
    """Delegates reads to *inner* and records writes without sending them."""

    def __init__(self, inner: ChannelSource) -> None:
        self._inner = inner
        self._operations: list[DryRunOperation] = []

    @property
    def operations(self) -> tuple[DryRunOperation, ...]:
        return tuple(self._operations)

    async def __aenter__(self) -> DryRunChannelSource:
        await self._inner.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self._inner.__aexit__(exc_type, exc_val, exc_tb)

    async def get_channel(self, channel_id: int) -> Channel:
        return await self._inner.get_channel(channel_id)

    async def fetch_models(self, channel_id: int) -> list[str]:
        return await self._inner.fetch_models(channel_id)

    async def update_models(self, channel_id: int, models: list[str]) -> None:
        self._operations.append(
            DryRunOperation(
                sequence=len(self._operations) + 1,
                name="update_models",
                channel_id=channel_id,
                payload={"models": join_models(models)},
            )
        )
