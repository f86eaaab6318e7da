"""Batch run state contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from modelsync.contracts.plan import IncompatibleMapping, ModelPlan, UpdateMode


class BatchPhase(StrEnum):
    PLANNING = "planning"
    PLAN_REVIEW = "plan_review"
    EXECUTING = "executing"
    COMPLETED = "completed"
    STOPPED = "stopped"
    ERROR = "error"


class ChannelStatus(StrEnum):
    PENDING = "pending"
    PLANNING = "planning"
    PLAN_READY = "plan_ready"
    PLAN_FAILED = "plan_failed"
    EXECUTING = "executing"
    SUCCESS = "success"
    FAILED = "failed"


class ProgressCounter(BaseModel):
    completed: int = 0
    total: int = 0

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 0
        return min(100, max(0, round(self.completed * 100 / self.total)))


class ChannelRunState(BaseModel):
    channel_id: int
    channel_name: str = ""
    status: ChannelStatus = ChannelStatus.PENDING
    available_models: list[str] = Field(default_factory=list)
    current_models: list[str] = Field(default_factory=list)
    plan: ModelPlan = Field(default_factory=ModelPlan)
    incompatible_mappings: list[IncompatibleMapping] = Field(default_factory=list)
    error: str | None = None


class ChannelDetail(BaseModel):
    channel_id: int
    channel_name: str = ""
    success: bool
    added_count: int = 0
    removed_count: int = 0
    added_models: list[str] = Field(default_factory=list)
    removed_models: list[str] = Field(default_factory=list)
    error: str | None = None


class PlanFailure(BaseModel):
    channel_id: int
    channel_name: str = ""
    error: str


class BatchSummary(BaseModel):
    success: int = 0
    failed: int = 0
    details: list[ChannelDetail] = Field(default_factory=list)
    plan_failures: list[PlanFailure] = Field(default_factory=list)

    def record(self, detail: ChannelDetail) -> None:
        if detail.success:
            self.success += 1
        else:
            self.failed += 1
        self.details.append(detail)


class BatchRun(BaseModel):
    mode: UpdateMode = UpdateMode.FULL
    phase: BatchPhase | None = None
    planning: ProgressCounter = Field(default_factory=ProgressCounter)
    execution: ProgressCounter = Field(default_factory=ProgressCounter)
    states: dict[int, ChannelRunState] = Field(default_factory=dict)
    summary: BatchSummary | None = None

    @property
    def progress(self) -> ProgressCounter:
        if self.phase in (BatchPhase.EXECUTING, BatchPhase.COMPLETED) or self.execution.total:
            return self.execution
        return self.planning

    def channels_with_status(self, status: ChannelStatus) -> list[ChannelRunState]:
        return [state for state in self.states.values() if state.status is status]
