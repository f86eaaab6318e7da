"""Operator review of planned changes before execution."""

from __future__ import annotations

import logging

from modelsync.contracts.batch import ChannelStatus
from modelsync.contracts.exceptions import ConfigError, ReviewError
from modelsync.contracts.plan import ModelAction, OverrideState
from modelsync.engine.reconciler import BatchReconciler

_LOG = logging.getLogger(__name__)


def parse_skip(value: str) -> tuple[int, ModelAction, str]:
    """Parse ``CHANNEL:ACTION:MODEL``; the model part may itself contain colons."""
    parts = value.split(":", 2)
    if len(parts) != 3 or not parts[2]:
        raise ConfigError(f"invalid --skip value {value!r}: expected CHANNEL:ACTION:MODEL")
    channel, action, model = parts
    try:
        return int(channel), ModelAction(action), model
    except ValueError as exc:
        raise ConfigError(f"invalid --skip value {value!r}: {exc}") from exc


def apply_skips(reconciler: BatchReconciler, skips: list[tuple[int, ModelAction, str]]) -> None:
    for channel_id, action, model in skips:
        try:
            reconciler.set_override(channel_id, action, model, OverrideState.INACTIVE)
        except ReviewError as exc:
            _LOG.warning("Ignoring --skip %s:%s:%s: %s", channel_id, action, model, exc)


async def interactive_review(reconciler: BatchReconciler) -> None:
    """Let the operator untick planned changes, then confirm or cancel the run."""
    import questionary

    mode = reconciler.mode
    run = reconciler.snapshot()
    try:
        for state in run.channels_with_status(ChannelStatus.PLAN_READY):
            choices: list[questionary.Choice] = []
            if mode.adds:
                choices.extend(
                    questionary.Choice(
                        f"+ {model}",
                        value=(ModelAction.ADD, model),
                        checked=reconciler.overrides.is_active(state.channel_id, ModelAction.ADD, model),
                    )
                    for model in state.plan.to_add
                )
            if mode.removes:
                choices.extend(
                    questionary.Choice(
                        f"- {model}",
                        value=(ModelAction.REMOVE, model),
                        checked=reconciler.overrides.is_active(state.channel_id, ModelAction.REMOVE, model),
                    )
                    for model in state.plan.to_remove
                )
            if not choices:
                continue

            prompt = questionary.checkbox(f"[{state.channel_id}] {state.channel_name}", choices=choices)
            selected = await prompt.ask_async()
            if selected is None:
                raise KeyboardInterrupt
            kept = set(selected)
            for choice in choices:
                action, model = choice.value
                desired = OverrideState.ACTIVE if (action, model) in kept else OverrideState.INACTIVE
                reconciler.set_override(state.channel_id, action, model, desired)

        if not await questionary.confirm("Apply the reviewed changes?", default=True).ask_async():
            raise KeyboardInterrupt
    except KeyboardInterrupt:
        print("Aborted.")
        reconciler.cancel()
