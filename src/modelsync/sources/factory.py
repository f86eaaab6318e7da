"""Factory for creating channel source instances.

Decouples source selection from source implementation. The SDK uses this
factory to instantiate sources by name, without importing concrete sources.
"""

from __future__ import annotations

from collections.abc import Callable

from modelsync.contracts.config import ModelSyncConfig
from modelsync.contracts.source import ChannelSource
from modelsync.sources.http import HttpChannelSource

SourceBuilder = Callable[[ModelSyncConfig], ChannelSource]


def _build_http(config: ModelSyncConfig) -> ChannelSource:
    return HttpChannelSource(base_url=config.base_url, headers=config.headers, timeout=config.timeout)


_REGISTRY: dict[str, SourceBuilder] = {}


def register(name: str, builder: SourceBuilder) -> None:
    """Register a source builder by name."""
    _REGISTRY[name] = builder


register("http", _build_http)


def create_source(config: ModelSyncConfig) -> ChannelSource:
    """Create the source named by ``config.source``.

    Raises:
        ValueError: If the source name is not registered.
    """
    builder = _REGISTRY.get(config.source)
    if builder is None:
        available = ", ".join(sorted(_REGISTRY)) or "(none registered)"
        raise ValueError(f"Unknown channel source: {config.source!r}. Available: {available}")
    return builder(config)
