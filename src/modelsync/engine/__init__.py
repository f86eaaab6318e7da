"""Planning and reconciliation engine."""

from modelsync.engine.cancellation import CancellationToken
from modelsync.engine.mapping import parse_model_mapping
from modelsync.engine.overrides import PlanOverrideStore
from modelsync.engine.planner import apply_plan, check_mapping_compatibility, generate_update_plan, mapped_targets
from modelsync.engine.progress import BatchProgress, NullBatchProgress
from modelsync.engine.reconciler import EXECUTE_PHASE, PLAN_PHASE, BatchReconciler

__all__ = [
    "EXECUTE_PHASE",
    "PLAN_PHASE",
    "BatchProgress",
    "BatchReconciler",
    "CancellationToken",
    "NullBatchProgress",
    "PlanOverrideStore",
    "apply_plan",
    "check_mapping_compatibility",
    "generate_update_plan",
    "mapped_targets",
    "parse_model_mapping",
]
