"""Batch reconciliation of channel model lists."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence

from modelsync.contracts.batch import (
    BatchPhase,
    BatchRun,
    BatchSummary,
    ChannelDetail,
    ChannelRunState,
    ChannelStatus,
    PlanFailure,
    ProgressCounter,
)
from modelsync.contracts.channel import Channel
from modelsync.contracts.exceptions import BatchStoppedError, EmptyBatchError, ReviewError
from modelsync.contracts.plan import ModelAction, OverrideState, UpdateMode
from modelsync.contracts.source import ChannelSource
from modelsync.engine.cancellation import CancellationToken
from modelsync.engine.mapping import parse_model_mapping
from modelsync.engine.overrides import PlanOverrideStore
from modelsync.engine.planner import apply_plan, check_mapping_compatibility, generate_update_plan
from modelsync.engine.progress import BatchProgress, NullBatchProgress

_LOG = logging.getLogger(__name__)

PLAN_PHASE = "Plan"
EXECUTE_PHASE = "Execute"

ReviewCallback = Callable[["BatchReconciler"], Awaitable[None] | None]


def _error_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class BatchReconciler:
    """Plan, review and apply model list updates across a set of channels.

    Channels are processed one at a time in both phases. A failure on one
    channel is recorded on its state and never stops the others.
    """

    def __init__(
        self,
        source: ChannelSource,
        *,
        mode: UpdateMode = UpdateMode.FULL,
        progress: BatchProgress | None = None,
        token: CancellationToken | None = None,
    ) -> None:
        self._source = source
        self._mode = mode
        self._progress: BatchProgress = progress or NullBatchProgress()
        self._token = token or CancellationToken()
        self._overrides = PlanOverrideStore()
        self._channels: dict[int, Channel] = {}
        self._run = BatchRun(mode=mode)

    @property
    def mode(self) -> UpdateMode:
        return self._mode

    @property
    def token(self) -> CancellationToken:
        return self._token

    @property
    def phase(self) -> BatchPhase | None:
        return self._run.phase

    @property
    def progress(self) -> ProgressCounter:
        return self._run.progress.model_copy()

    @property
    def summary(self) -> BatchSummary | None:
        return self._run.summary

    @property
    def overrides(self) -> PlanOverrideStore:
        return self._overrides

    def state(self, channel_id: int) -> ChannelRunState:
        try:
            return self._run.states[channel_id]
        except KeyError:
            raise ReviewError(f"Channel {channel_id} is not part of this run") from None

    def snapshot(self) -> BatchRun:
        return self._run.model_copy(deep=True)

    async def run(
        self,
        channels: Sequence[Channel],
        review: ReviewCallback | None = None,
        *,
        load_failures: Mapping[int, str] | None = None,
    ) -> BatchRun:
        """Plan, hand the run to *review*, then execute unless it was cancelled."""
        await self.plan(channels, load_failures=load_failures)
        if self._run.phase is BatchPhase.PLAN_REVIEW and review is not None:
            outcome = review(self)
            if inspect.isawaitable(outcome):
                await outcome
        if self._run.phase is BatchPhase.PLAN_REVIEW:
            await self.execute()
        return self.snapshot()

    async def plan(
        self,
        channels: Sequence[Channel],
        *,
        load_failures: Mapping[int, str] | None = None,
    ) -> BatchRun:
        """Plan every channel in order.

        *load_failures* maps channel ids whose snapshot could not be loaded to
        the error message; they are recorded as failed plans after the loaded
        channels.
        """
        failures = dict(load_failures or {})
        self._reset(channels, failures)
        if not self._run.states:
            self._run.phase = BatchPhase.ERROR
            self._run.summary = BatchSummary()
            self._progress.phase_error(PLAN_PHASE, EmptyBatchError("No channels selected"))
            _LOG.warning("Batch run aborted: no channels selected")
            return self.snapshot()

        self._run.phase = BatchPhase.PLANNING
        self._progress.phase_start(PLAN_PHASE, total=len(self._run.states))
        for channel_id, state in self._run.states.items():
            if self._token.cancelled:
                break
            channel = self._channels.get(channel_id)
            if channel is None:
                self._fail_plan(state, failures[channel_id])
            else:
                await self._plan_channel(channel, state)
            self._run.planning.completed += 1
            self._progress.item_done(PLAN_PHASE)

        if self._token.cancelled:
            self._stop(PLAN_PHASE)
        else:
            self._run.phase = BatchPhase.PLAN_REVIEW
            self._progress.phase_done(PLAN_PHASE)
        return self.snapshot()

    async def _plan_channel(self, channel: Channel, state: ChannelRunState) -> None:
        state.status = ChannelStatus.PLANNING
        try:
            available = await self._source.fetch_models(channel.id)
        except Exception as exc:
            self._fail_plan(state, _error_message(exc))
            return

        current = list(channel.models)
        mapping = parse_model_mapping(channel.model_mapping)
        state.available_models = list(available)
        state.current_models = current
        state.plan = generate_update_plan(current, available, mapping, self._mode)
        state.incompatible_mappings = check_mapping_compatibility(current, available, mapping)
        state.status = ChannelStatus.PLAN_READY
        self._overrides.initialize(channel.id, state.plan)
        _LOG.debug(
            "Planned channel %s: +%d -%d",
            channel.id,
            len(state.plan.to_add),
            len(state.plan.to_remove),
        )

    def _fail_plan(self, state: ChannelRunState, error: str) -> None:
        state.status = ChannelStatus.PLAN_FAILED
        state.error = error
        _LOG.warning("Planning failed for channel %s: %s", state.channel_id, error)

    def toggle(self, channel_id: int, action: ModelAction, model: str) -> OverrideState:
        self._check_reviewable(channel_id, action, model)
        return self._overrides.toggle(channel_id, action, model)

    def set_override(self, channel_id: int, action: ModelAction, model: str, state: OverrideState) -> None:
        self._check_reviewable(channel_id, action, model)
        self._overrides.set_state(channel_id, action, model, state)

    def _check_reviewable(self, channel_id: int, action: ModelAction, model: str) -> None:
        if self._run.phase is not BatchPhase.PLAN_REVIEW:
            raise ReviewError(f"Plan overrides can only change during review (phase: {self._run.phase})")
        state = self.state(channel_id)
        if state.status is not ChannelStatus.PLAN_READY:
            raise ReviewError(f"Channel {channel_id} has no plan to review")
        if model not in state.plan.models_for(action):
            raise ReviewError(f"Model {model!r} is not planned for {action} on channel {channel_id}")

    def cancel(self) -> None:
        """Request a stop; honoured between channels, or at once during review."""
        self._token.cancel()
        if self._run.phase is BatchPhase.PLAN_REVIEW:
            self._run.phase = BatchPhase.STOPPED
            self._run.summary = self._new_summary()

    async def execute(self) -> BatchSummary:
        if self._run.phase is not BatchPhase.PLAN_REVIEW:
            raise ReviewError(f"Execution requires a reviewed plan (phase: {self._run.phase})")

        overrides = self._overrides.snapshot()
        self._overrides = overrides
        summary = self._new_summary()
        eligible = self._run.channels_with_status(ChannelStatus.PLAN_READY)
        if self._token.cancelled:
            self._run.summary = summary
            self._stop(EXECUTE_PHASE)
            return summary

        self._run.phase = BatchPhase.EXECUTING
        if not eligible:
            self._run.phase = BatchPhase.COMPLETED
            self._run.summary = summary
            return summary

        self._run.execution = ProgressCounter(total=len(eligible))
        self._progress.phase_start(EXECUTE_PHASE, total=len(eligible))
        for state in eligible:
            if self._token.cancelled:
                break
            detail = await self._execute_channel(state, overrides)
            summary.record(detail)
            self._run.execution.completed += 1
            self._progress.item_done(EXECUTE_PHASE)

        self._run.summary = summary
        if self._token.cancelled:
            self._stop(EXECUTE_PHASE)
        else:
            self._run.phase = BatchPhase.COMPLETED
            self._progress.phase_done(EXECUTE_PHASE)
            _LOG.info("Batch update finished: %d succeeded, %d failed", summary.success, summary.failed)
        return summary

    async def _execute_channel(self, state: ChannelRunState, overrides: PlanOverrideStore) -> ChannelDetail:
        state.status = ChannelStatus.EXECUTING
        channel_id = state.channel_id
        adds = overrides.active(channel_id, ModelAction.ADD, state.plan.to_add) if self._mode.adds else []
        removes = overrides.active(channel_id, ModelAction.REMOVE, state.plan.to_remove) if self._mode.removes else []
        detail = ChannelDetail(
            channel_id=channel_id,
            channel_name=state.channel_name,
            success=True,
            added_count=len(adds),
            removed_count=len(removes),
            added_models=adds,
            removed_models=removes,
        )
        if not adds and not removes:
            state.status = ChannelStatus.SUCCESS
            return detail

        models = apply_plan(state.current_models, adds, removes)
        try:
            await self._source.update_models(channel_id, models)
        except Exception as exc:
            state.status = ChannelStatus.FAILED
            state.error = _error_message(exc)
            _LOG.warning("Update failed for channel %s: %s", channel_id, state.error)
            return detail.model_copy(update={"success": False, "error": state.error})

        state.status = ChannelStatus.SUCCESS
        return detail

    def _reset(self, channels: Sequence[Channel], failures: Mapping[int, str]) -> None:
        self._token.reset()
        self._overrides = PlanOverrideStore()
        self._channels = {channel.id: channel for channel in channels}
        states = {
            channel.id: ChannelRunState(channel_id=channel.id, channel_name=channel.display_name)
            for channel in self._channels.values()
        }
        for channel_id in failures:
            states.setdefault(channel_id, ChannelRunState(channel_id=channel_id, channel_name=f"#{channel_id}"))
        self._run = BatchRun(mode=self._mode, planning=ProgressCounter(total=len(states)), states=states)

    def _stop(self, phase: str) -> None:
        self._run.phase = BatchPhase.STOPPED
        if self._run.summary is None:
            self._run.summary = self._new_summary()
        self._progress.phase_error(phase, BatchStoppedError(f"{phase} stopped before all channels were processed"))
        _LOG.info("Batch run stopped during %s", phase.lower())

    def _new_summary(self) -> BatchSummary:
        return BatchSummary(
            plan_failures=[
                PlanFailure(channel_id=state.channel_id, channel_name=state.channel_name, error=state.error or "")
                for state in self._run.channels_with_status(ChannelStatus.PLAN_FAILED)
            ]
        )
