"""Public API surface for modelsync."""

__version__ = "0.1.0"

from modelsync.config import load_config
from modelsync.contracts import (
    BatchPhase,
    BatchRun,
    BatchStoppedError,
    BatchSummary,
    Channel,
    ChannelDetail,
    ChannelRunState,
    ChannelSource,
    ChannelSourceError,
    ChannelStatus,
    ConfigError,
    EmptyBatchError,
    FetchError,
    IncompatibleMapping,
    ModelAction,
    ModelPlan,
    ModelSyncConfig,
    ModelSyncError,
    OverrideState,
    PlanFailure,
    ProgressCounter,
    ReconcileError,
    ReviewError,
    UpdateError,
    UpdateMode,
)
from modelsync.engine import (
    BatchProgress,
    BatchReconciler,
    CancellationToken,
    PlanOverrideStore,
    check_mapping_compatibility,
    generate_update_plan,
    parse_model_mapping,
)
from modelsync.sdk import ModelSync
from modelsync.sources import create_source

__all__ = [
    "BatchPhase",
    "BatchProgress",
    "BatchReconciler",
    "BatchRun",
    "BatchStoppedError",
    "BatchSummary",
    "CancellationToken",
    "Channel",
    "ChannelDetail",
    "ChannelRunState",
    "ChannelSource",
    "ChannelSourceError",
    "ChannelStatus",
    "ConfigError",
    "EmptyBatchError",
    "FetchError",
    "IncompatibleMapping",
    "ModelAction",
    "ModelPlan",
    "ModelSync",
    "ModelSyncConfig",
    "ModelSyncError",
    "OverrideState",
    "PlanFailure",
    "PlanOverrideStore",
    "ProgressCounter",
    "ReconcileError",
    "ReviewError",
    "UpdateError",
    "UpdateMode",
    "__version__",
    "check_mapping_compatibility",
    "create_source",
    "generate_update_plan",
    "load_config",
    "parse_model_mapping",
]
