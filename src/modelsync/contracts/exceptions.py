"""Exception hierarchy for modelsync."""

from __future__ import annotations


class ModelSyncError(Exception):
    """Base exception for all modelsync errors."""


class ConfigError(ModelSyncError):
    """Configuration loading or validation failure."""


class ChannelSourceError(ModelSyncError):
    """Base channel source operation failure."""

    def __init__(self, message: str, *, channel_id: int | None = None) -> None:
        super().__init__(message)
        self.channel_id = channel_id


class FetchError(ChannelSourceError):
    """Available models could not be fetched for a channel."""


class UpdateError(ChannelSourceError):
    """Replacement model list was rejected or could not be sent."""


class ReconcileError(ModelSyncError):
    """Orchestrator-level failure."""


class EmptyBatchError(ReconcileError):
    """No channels were supplied to a batch run."""


class ReviewError(ReconcileError):
    """Operation is not valid in the current batch phase."""


class BatchStoppedError(ModelSyncError):
    """A phase was stopped by cancellation before visiting every channel."""
