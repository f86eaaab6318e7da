from __future__ import annotations

import pytest

from modelsync.contracts.config import ModelSyncConfig
from modelsync.sources import factory
from modelsync.sources.factory import create_source, register
from modelsync.sources.http import HttpChannelSource
from tests.fakes.source import FakeChannelSource


def test_create_source_builds_http_source_by_default() -> None:
    source = create_source(ModelSyncConfig(base_url="http://upstream.test"))

    assert isinstance(source, HttpChannelSource)


def test_create_source_unknown_name_lists_available() -> None:
    with pytest.raises(ValueError, match="Unknown channel source: 'nope'"):
        create_source(ModelSyncConfig(source="nope"))


def test_register_adds_custom_source(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(factory, "_REGISTRY", dict(factory._REGISTRY))
    fake = FakeChannelSource()
    register("fake", lambda config: fake)

    assert create_source(ModelSyncConfig(source="fake")) is fake
