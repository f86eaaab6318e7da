"""Channel source implementations."""

from modelsync.sources.dry_run import DryRunChannelSource, DryRunOperation
from modelsync.sources.factory import create_source, register
from modelsync.sources.http import HttpChannelSource

__all__ = ["DryRunChannelSource", "DryRunOperation", "HttpChannelSource", "create_source", "register"]
