"""Public contracts for modelsync."""

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
from modelsync.contracts.channel import Channel, join_models, split_models
from modelsync.contracts.config import ModelSyncConfig
from modelsync.contracts.exceptions import (
    BatchStoppedError,
    ChannelSourceError,
    ConfigError,
    EmptyBatchError,
    FetchError,
    ModelSyncError,
    ReconcileError,
    ReviewError,
    UpdateError,
)
from modelsync.contracts.plan import IncompatibleMapping, ModelAction, ModelPlan, OverrideState, UpdateMode
from modelsync.contracts.source import ChannelSource

__all__ = [
    "BatchPhase",
    "BatchRun",
    "BatchStoppedError",
    "BatchSummary",
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
    "ModelSyncConfig",
    "ModelSyncError",
    "OverrideState",
    "PlanFailure",
    "ProgressCounter",
    "ReconcileError",
    "ReviewError",
    "UpdateError",
    "UpdateMode",
    "join_models",
    "split_models",
]
