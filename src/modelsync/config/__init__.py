"""Configuration loading exports."""

from modelsync.config.loader import load_config

__all__ = ["load_config"]
