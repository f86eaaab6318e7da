"""SDK composition root for modelsync."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from modelsync.contracts.batch import BatchRun
from modelsync.contracts.channel import Channel
from modelsync.contracts.config import ModelSyncConfig
from modelsync.contracts.exceptions import ChannelSourceError, ConfigError
from modelsync.contracts.plan import UpdateMode
from modelsync.contracts.source import ChannelSource
from modelsync.engine.cancellation import CancellationToken
from modelsync.engine.progress import BatchProgress
from modelsync.engine.reconciler import BatchReconciler, ReviewCallback
from modelsync.persistence.report import BatchReport, persist_report
from modelsync.sources.dry_run import DryRunChannelSource
from modelsync.sources.factory import create_source

_LOG = logging.getLogger(__name__)


class ModelSync:
    """modelsync SDK public API."""

    def __init__(
        self,
        *,
        config: ModelSyncConfig,
        source: ChannelSource | None = None,
        progress: BatchProgress | None = None,
        token: CancellationToken | None = None,
    ) -> None:
        self._config = config
        self._source = source
        self._progress = progress
        self._token = token or CancellationToken()
        self._active: BatchReconciler | None = None

    @classmethod
    async def from_config(
        cls,
        config: ModelSyncConfig,
        *,
        progress: BatchProgress | None = None,
        token: CancellationToken | None = None,
    ) -> ModelSync:
        try:
            source = create_source(config)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        return cls(config=config, source=source, progress=progress, token=token)

    @property
    def config(self) -> ModelSyncConfig:
        return self._config

    @property
    def token(self) -> CancellationToken:
        return self._token

    def cancel(self) -> None:
        """Request a stop; a run waiting for review stops at once."""
        if self._active is not None:
            self._active.cancel()
        else:
            self._token.cancel()

    async def plan(
        self,
        channel_ids: Sequence[int] | None = None,
        *,
        mode: UpdateMode | None = None,
    ) -> BatchRun:
        """Fetch available models and compute plans without applying them."""
        source = self._require_source()
        async with source:
            channels, failures = await self._load_channels(source, channel_ids)
            with self._activate(source, mode) as reconciler:
                return await reconciler.plan(channels, load_failures=failures)

    async def update(
        self,
        channel_ids: Sequence[int] | None = None,
        *,
        mode: UpdateMode | None = None,
        dry_run: bool = False,
        review: ReviewCallback | None = None,
    ) -> BatchRun:
        """Plan, review and apply model list updates for the selected channels."""
        source = self._require_source()
        if dry_run:
            source = DryRunChannelSource(source)
        async with source:
            channels, failures = await self._load_channels(source, channel_ids)
            with self._activate(source, mode) as reconciler:
                run = await reconciler.run(channels, review=review, load_failures=failures)

        if self._config.report_path is not None:
            report = BatchReport(
                mode=run.mode,
                phase=run.phase,
                dry_run=dry_run,
                summary=run.summary,
                channels=list(run.states.values()),
            )
            path = persist_report(report=report, report_path=self._config.report_path)
            _LOG.info("Wrote batch report to %s", path)
        return run

    async def _load_channels(
        self, source: ChannelSource, channel_ids: Sequence[int] | None
    ) -> tuple[list[Channel], dict[int, str]]:
        ids = list(channel_ids) if channel_ids is not None else list(self._config.channels)
        channels: list[Channel] = []
        failures: dict[int, str] = {}
        for channel_id in dict.fromkeys(ids):
            try:
                channels.append(await source.get_channel(channel_id))
            except ChannelSourceError as exc:
                failures[channel_id] = str(exc) or type(exc).__name__
                _LOG.warning("Could not load channel %s: %s", channel_id, failures[channel_id])
        return channels, failures

    @contextmanager
    def _activate(self, source: ChannelSource, mode: UpdateMode | None) -> Iterator[BatchReconciler]:
        reconciler = BatchReconciler(
            source,
            mode=mode or self._config.update_mode,
            progress=self._progress,
            token=self._token,
        )
        self._active = reconciler
        try:
            yield reconciler
        finally:
            self._active = None

    def _require_source(self) -> ChannelSource:
        if self._source is None:
            raise ConfigError("No channel source configured")
        return self._source
