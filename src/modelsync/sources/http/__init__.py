"""HTTP channel source."""

from modelsync.sources.http.client import ApiEnvelope, HttpChannelSource

__all__ = ["ApiEnvelope", "HttpChannelSource"]
