"""Channel source adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from modelsync.contracts.channel import Channel


class ChannelSource(ABC):
    """Remote system that owns channels and their model lists."""

    @abstractmethod
    async def __aenter__(self) -> ChannelSource: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def get_channel(self, channel_id: int) -> Channel: ...  # pragma: no cover

    @abstractmethod
    async def fetch_models(self, channel_id: int) -> list[str]: ...  # pragma: no cover

    @abstractmethod
    async def update_models(self, channel_id: int, models: list[str]) -> None: ...  # pragma: no cover
