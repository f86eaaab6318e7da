"""CLI progress displays."""

from modelsync.cli.progress.rich import RichBatchProgress

__all__ = ["RichBatchProgress"]
