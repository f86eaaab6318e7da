"""Batch report persistence helpers."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from modelsync.contracts.batch import BatchPhase, BatchSummary, ChannelRunState
from modelsync.contracts.exceptions import ReconcileError
from modelsync.contracts.plan import UpdateMode


class BatchReport(BaseModel):
    mode: UpdateMode
    phase: BatchPhase | None
    dry_run: bool = False
    summary: BatchSummary | None = None
    channels: list[ChannelRunState] = Field(default_factory=list)


def output_report_path(*, report_path: Path, dry_run: bool) -> Path:
    if not dry_run:
        return report_path
    return Path(f"{report_path}.dry-run")


def persist_report(*, report: BatchReport, report_path: Path) -> Path:
    path = output_report_path(report_path=report_path, dry_run=report.dry_run)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    except OSError as exc:
        raise ReconcileError(f"failed to persist report: {path}") from exc
    return path
