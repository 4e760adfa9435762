from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..commands.sync import (
    configure_sync_parsers,
    run_check_command,
    run_render_command,
    run_resolve_command,
    run_update_command,
)
from ..commands.target import configure_target_parser, run_select_target_command
from ..core.context import RunContext
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_INTERNAL, ERR_USAGE
from ..core.logging import log_event
from .output import render_error

COMMANDS = {
    "check": run_check_command,
    "update": run_update_command,
    "render": run_render_command,
    "resolve": run_resolve_command,
    "select-target": run_select_target_command,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="commentaryctl",
        description="Keep the commentary block of a Lisp file in sync with the project README.",
    )
    p.add_argument("--version", action="version", version=f"commentaryctl {__version__}")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines on stderr")
    p.add_argument("--run-id", help="run identifier attached to log events and payloads")
    p.add_argument("--config", help="config file (default: .commentaryctl.yml at the project root)")
    p.add_argument("--cwd", help="run as if started in this directory")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable debug log events")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)
    configure_sync_parsers(sub)
    configure_target_parser(sub)
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    try:
        ns = p.parse_args(argv)
    except SystemExit as exc:
        return int(exc.code) if isinstance(exc.code, int) else ERR_USAGE
    ctx = RunContext.from_args(
        run_id=ns.run_id,
        cwd=ns.cwd,
        output_format="json" if ns.json else "text",
        verbose=ns.verbose,
        quiet=ns.quiet,
        log_json=ns.log_json,
        config_path=ns.config,
    )
    log_event(ctx, "debug", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format)
    try:
        return COMMANDS[ns.cmd](ctx, ns)
    except ScriptError as exc:
        log_event(ctx, "debug", "cli", "failed", cmd=ns.cmd, kind=exc.kind, code=exc.code)
        print(
            render_error(as_json=ctx.as_json, message=str(exc), code=exc.code, kind=exc.kind, run_id=ctx.run_id),
            file=sys.stderr,
        )
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(
                as_json=ctx.as_json,
                message=f"internal error: {exc}",
                code=ERR_INTERNAL,
                kind="internal_error",
                run_id=ctx.run_id,
            ),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
