"""Update command formatting."""

from __future__ import annotations

import argparse
from pathlib import Path

from modelsync.cli.common import format_comma_or_none
from modelsync.cli.progress.rich import RichBatchProgress
from modelsync.cli.review import apply_skips, interactive_review, parse_skip
from modelsync.contracts.batch import BatchPhase, BatchRun
from modelsync.contracts.plan import ModelAction, UpdateMode
from modelsync.engine.reconciler import BatchReconciler, ReviewCallback


def format_update_summary(run: BatchRun, *, dry_run: bool) -> str:
    mode = "dry-run" if dry_run else "apply"
    phase = run.phase.value if run.phase is not None else "not started"
    summary = run.summary
    lines = [
        "",
        f"modelsync - update {phase} ({mode}, {run.mode.value})",
        "",
    ]
    if summary is None:
        lines.append("  Status:    no summary available")
        lines.append("")
        return "\n".join(lines)

    lines.append(f"  Executed:  {run.execution.completed}/{run.execution.total} ({run.execution.percent}%)")
    lines.append(f"  Succeeded: {summary.success}")
    lines.append(f"  Failed:    {summary.failed}")
    if summary.plan_failures:
        lines.append(f"  Unplanned: {len(summary.plan_failures)}")
    lines.append("")

    for detail in summary.details:
        header = f"  [{detail.channel_id}] {detail.channel_name}"
        if not detail.success:
            lines.append(f"{header}: failed: {detail.error}")
            continue
        if not detail.added_count and not detail.removed_count:
            lines.append(f"{header}: up to date")
            continue
        lines.append(header)
        lines.append(f"      added ({detail.added_count}):   {format_comma_or_none(detail.added_models)}")
        lines.append(f"      removed ({detail.removed_count}): {format_comma_or_none(detail.removed_models)}")
    for failure in summary.plan_failures:
        lines.append(f"  [{failure.channel_id}] {failure.channel_name}: plan failed: {failure.error}")

    if run.phase is BatchPhase.STOPPED:
        lines.append("")
        lines.append("  [stopped] Remaining channels were not processed")
    if dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")
    lines.append("")
    return "\n".join(lines)


def _build_review(
    skips: list[tuple[int, ModelAction, str]], *, interactive: bool, progress: RichBatchProgress | None
) -> ReviewCallback:
    async def review(reconciler: BatchReconciler) -> None:
        apply_skips(reconciler, skips)
        if not interactive:
            return
        if progress is not None:
            progress.pause()
        try:
            await interactive_review(reconciler)
        finally:
            if progress is not None:
                progress.resume()

    return review


async def run_update(args: argparse.Namespace) -> BatchRun:
    import modelsync.cli as cli

    config = cli.load_config(args.config)
    if args.report:
        config = config.model_copy(update={"report_path": Path(args.report).expanduser().resolve()})
    mode = UpdateMode(args.mode) if args.mode else None
    skips = [parse_skip(value) for value in args.skip]
    interactive = not args.yes

    if not args.verbose:
        with RichBatchProgress() as progress:
            ms = await cli.ModelSync.from_config(config, progress=progress)
            review = _build_review(skips, interactive=interactive, progress=progress)
            with cli.stop_on_interrupt(ms.token):
                run = await ms.update(args.channels, mode=mode, dry_run=args.dry_run, review=review)
    else:
        ms = await cli.ModelSync.from_config(config)
        review = _build_review(skips, interactive=interactive, progress=None)
        with cli.stop_on_interrupt(ms.token):
            run = await ms.update(args.channels, mode=mode, dry_run=args.dry_run, review=review)

    print(format_update_summary(run, dry_run=args.dry_run))
    return run


__all__ = ["format_update_summary", "run_update"]
