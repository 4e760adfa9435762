from __future__ import annotations

import argparse
from pathlib import Path

from ..cli.output import build_base_payload, emit
from ..config import save_target
from ..core.context import RunContext
from ..core.exit_codes import OK
from ..core.logging import log_event
from ..core.repo_root import project_root_for


def configure_target_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("select-target", help="persist the target file used before name heuristics")
    p.add_argument("path", help="target file, absolute or relative to the project root")
    p.add_argument("--project-root", help="project root holding the config file (default: detected from cwd)")


def run_select_target_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    root = Path(ns.project_root).resolve() if ns.project_root else project_root_for(None, ctx.cwd)
    written = save_target(root, ns.path, ctx.config_path)
    log_event(ctx, "info", "config", "target_selected", target=ns.path, config=written)
    if ctx.as_json:
        payload = build_base_payload(ctx, "select-target")
        payload.update(target=ns.path, config=str(written))
        emit(payload, True)
    else:
        print(f"{written}: target set to {ns.path}")
    return OK
