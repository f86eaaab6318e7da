"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from modelsync import BatchPhase, ChannelSourceError, ChannelStatus, ConfigError, ReconcileError


def main(argv: list[str] | None = None) -> int:
    import modelsync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "plan":
            run = cli.asyncio.run(cli._run_plan(args))
            if run.phase is BatchPhase.ERROR:
                print("error: no channels selected", file=sys.stderr)
                return 5
            if run.phase is not BatchPhase.PLAN_REVIEW:
                return 1
            return 1 if run.channels_with_status(ChannelStatus.PLAN_FAILED) else 0

        run = cli.asyncio.run(cli._run_update(args))
        if run.phase is BatchPhase.ERROR:
            print("error: no channels selected", file=sys.stderr)
            return 5
        summary = run.summary
        if run.phase is BatchPhase.COMPLETED and summary is not None:
            return 0 if summary.failed == 0 and not summary.plan_failures else 1
        return 1
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ChannelSourceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except ReconcileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
