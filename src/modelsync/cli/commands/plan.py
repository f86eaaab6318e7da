"""Plan command formatting."""

from __future__ import annotations

import argparse

from modelsync.cli.common import format_channel_plan
from modelsync.cli.progress.rich import RichBatchProgress
from modelsync.contracts.batch import BatchRun
from modelsync.contracts.plan import UpdateMode


def format_plan_summary(run: BatchRun) -> str:
    lines = [
        "",
        f"modelsync - plan ({run.mode.value})",
        "",
        f"  Phase:     {run.phase.value if run.phase is not None else 'not started'}",
        f"  Channels:  {run.planning.completed}/{run.planning.total} planned ({run.planning.percent}%)",
        "",
    ]
    for state in run.states.values():
        lines.extend(format_channel_plan(state, run.mode))
    lines.append("")
    return "\n".join(lines)


async def run_plan(args: argparse.Namespace) -> BatchRun:
    import modelsync.cli as cli

    config = cli.load_config(args.config)
    mode = UpdateMode(args.mode) if args.mode else None

    if not args.verbose:
        with RichBatchProgress() as progress:
            ms = await cli.ModelSync.from_config(config, progress=progress)
            with cli.stop_on_interrupt(ms.token):
                run = await ms.plan(args.channels, mode=mode)
    else:
        ms = await cli.ModelSync.from_config(config)
        with cli.stop_on_interrupt(ms.token):
            run = await ms.plan(args.channels, mode=mode)

    print(format_plan_summary(run))
    return run


__all__ = ["format_plan_summary", "run_plan"]
