"""Command-line interface for modelsync."""

from __future__ import annotations

import asyncio
import logging as logging

from modelsync import ModelSync as ModelSync
from modelsync import load_config as load_config
from modelsync.cli.app import main as main
from modelsync.cli.commands import plan as plan_command
from modelsync.cli.commands import update as update_command
from modelsync.cli.parser import build_parser as build_parser
from modelsync.cli.signals import stop_on_interrupt as stop_on_interrupt

_format_plan_summary = plan_command.format_plan_summary
_format_update_summary = update_command.format_update_summary

_run_plan = plan_command.run_plan
_run_update = update_command.run_update

__all__ = ["ModelSync", "asyncio", "build_parser", "load_config", "main", "stop_on_interrupt"]
