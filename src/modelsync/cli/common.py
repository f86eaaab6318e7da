"""Shared CLI formatting helpers."""

from __future__ import annotations

from modelsync.contracts.batch import ChannelRunState, ChannelStatus
from modelsync.contracts.plan import UpdateMode


def format_comma_or_none(values: list[str]) -> str:
    if not values:
        return "none"
    return ", ".join(values)


def format_channel_plan(state: ChannelRunState, mode: UpdateMode) -> list[str]:
    header = f"  [{state.channel_id}] {state.channel_name}"
    if state.status is ChannelStatus.PLAN_FAILED:
        return [f"{header}: plan failed: {state.error}"]
    if state.status is ChannelStatus.PENDING:
        return [f"{header}: not planned"]

    lines = [header]
    if mode.adds:
        lines.append(f"      add:    {format_comma_or_none(state.plan.to_add)}")
    if mode.removes:
        lines.append(f"      remove: {format_comma_or_none(state.plan.to_remove)}")
    for mapping in state.incompatible_mappings:
        note = " (alias itself available)" if mapping.alias_available else ""
        lines.append(f"      warning: {mapping.alias} -> {mapping.target} target unavailable{note}")
    return lines
