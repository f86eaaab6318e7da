"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from modelsync.contracts.plan import UpdateMode


def _package_version() -> str:
    try:
        return version("modelsync")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default="./modelsync.json", help="Path to modelsync.json")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in UpdateMode],
        default=None,
        help="Update mode (default: update_mode from config)",
    )
    parser.add_argument(
        "--channel",
        "-c",
        dest="channels",
        action="append",
        type=int,
        default=None,
        help="Channel ID to include (repeatable; default: channels from config)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modelsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    plan_parser = subparsers.add_parser("plan", help="Show proposed model list changes")
    _add_common_arguments(plan_parser)

    update_parser = subparsers.add_parser("update", help="Plan, review and apply model list changes")
    _add_common_arguments(update_parser)
    mode = update_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Preview mode")
    mode.add_argument("--apply", action="store_true", help="Apply mode")
    update_parser.add_argument("--yes", "-y", action="store_true", help="Skip the interactive review")
    update_parser.add_argument(
        "--skip",
        action="append",
        default=[],
        metavar="CHANNEL:ACTION:MODEL",
        help="Veto one planned change, e.g. 7:remove:gpt-3.5 (repeatable)",
    )
    update_parser.add_argument("--report", default=None, help="Write the run summary as JSON to this path")

    return parser


__all__ = ["build_parser"]
