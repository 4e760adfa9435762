from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from ..check import Mismatch, check
from ..cli.output import build_base_payload, emit
from ..config import CommentaryConfig, load_config
from ..core.context import RunContext
from ..core.errors import MismatchError, SourceReadError, UsageError
from ..core.exit_codes import ERR_MISMATCH, OK
from ..core.logging import log_event
from ..core.repo_root import project_root_for
from ..document import SourceDocument, default_source, load_document
from ..resolve import resolve
from ..update import dry_run, preview, update

MAX_POSITIONALS = 2


@dataclass(frozen=True)
class SyncInputs:
    document: SourceDocument
    source: Path
    project_root: Path
    config: CommentaryConfig
    hint: str | None


def _add_positionals(p: argparse.ArgumentParser, with_target: bool = True) -> None:
    help_text = "SOURCE [TARGET]: source document (default README.md) and target file name hint"
    p.add_argument("args", nargs="*", metavar="ARG", help=help_text if with_target else "SOURCE document")
    if with_target:
        p.add_argument("--file", dest="explicit_file", help="use this target file, skipping resolution")


def configure_sync_parsers(sub: argparse._SubParsersAction) -> None:
    check_p = sub.add_parser("check", help="verify the embedded commentary matches the source document")
    _add_positionals(check_p)
    update_p = sub.add_parser("update", help="rewrite the embedded commentary from the source document")
    _add_positionals(update_p)
    update_p.add_argument("--dry-run", action="store_true", help="print the diff instead of writing")
    render_p = sub.add_parser("render", help="print the commentary block rendered from the source document")
    _add_positionals(render_p, with_target=False)
    resolve_p = sub.add_parser("resolve", help="print the target file the source document maps to")
    _add_positionals(resolve_p)


def _split_positionals(args: list[str], limit: int) -> tuple[str | None, str | None]:
    if len(args) > limit:
        raise UsageError(f"expected at most {limit} positional argument(s), got {len(args)}: {' '.join(args)}")
    source = args[0] if args else None
    hint = args[1] if len(args) > 1 else None
    return source, hint


def _load_inputs(ctx: RunContext, ns: argparse.Namespace, limit: int = MAX_POSITIONALS) -> SyncInputs:
    source_arg, hint = _split_positionals(list(ns.args), limit)
    if source_arg is None:
        cwd_cfg = load_config(project_root_for(None, ctx.cwd), ctx.config_path)
        source = ctx.cwd / cwd_cfg.source if cwd_cfg.source else default_source(ctx.cwd)
    else:
        source = Path(source_arg) if Path(source_arg).is_absolute() else ctx.cwd / source_arg
    try:
        document = load_document(source)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(source, str(exc)) from exc
    root = project_root_for(source, ctx.cwd)
    config = load_config(root, ctx.config_path)
    log_event(ctx, "debug", "sync", "inputs", source=source, project_root=root)
    return SyncInputs(document=document, source=source, project_root=root, config=config, hint=hint)


def _target(ctx: RunContext, ns: argparse.Namespace, inputs: SyncInputs) -> tuple[Path, str]:
    explicit = getattr(ns, "explicit_file", None)
    if explicit:
        path = Path(explicit) if Path(explicit).is_absolute() else ctx.cwd / explicit
        return path, "forced"
    resolution = resolve(
        inputs.document,
        hint=inputs.hint,
        project_root=inputs.project_root,
        override=inputs.config.target,
        config=inputs.config,
        cwd=ctx.cwd,
        ctx=ctx,
    )
    return resolution.path, resolution.strategy


def run_check_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    inputs = _load_inputs(ctx, ns)
    target, strategy = _target(ctx, ns, inputs)
    result = check(inputs.document, target, inputs.config, ctx=ctx)
    if isinstance(result, Mismatch):
        if not ctx.as_json:
            raise MismatchError(target, result.report)
        payload = build_base_payload(ctx, "check", status="mismatch")
        payload.update(source=str(inputs.source), target=str(target), strategy=strategy, report=result.report)
        emit(payload, True)
        return ERR_MISMATCH
    if ctx.as_json:
        payload = build_base_payload(ctx, "check")
        payload.update(source=str(inputs.source), target=str(target), strategy=strategy)
        emit(payload, True)
    else:
        print(f"{target.name}: commentary up to date with {inputs.source.name}")
    return OK


def run_update_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    inputs = _load_inputs(ctx, ns)
    target, strategy = _target(ctx, ns, inputs)
    if ns.dry_run:
        report = dry_run(inputs.document, target, inputs.config)
        changed = bool(report)
    else:
        report = ""
        changed = update(inputs.document, target, inputs.config, ctx=ctx).changed
    if ctx.as_json:
        payload = build_base_payload(ctx, "update")
        payload.update(
            source=str(inputs.source),
            target=str(target),
            strategy=strategy,
            changed=changed,
            dry_run=bool(ns.dry_run),
            report=report,
        )
        emit(payload, True)
    elif ns.dry_run:
        print(report if changed else f"{target.name}: nothing to update", end="" if changed else "\n")
    else:
        print(f"{target.name}: {'updated' if changed else 'already up to date'}")
    return OK


def run_render_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    inputs = _load_inputs(ctx, ns, limit=1)
    text = preview(inputs.document, inputs.config)
    if ctx.as_json:
        payload = build_base_payload(ctx, "render")
        payload.update(source=str(inputs.source), text=text)
        emit(payload, True)
    else:
        print(text, end="")
    return OK


def run_resolve_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    inputs = _load_inputs(ctx, ns)
    target, strategy = _target(ctx, ns, inputs)
    if ctx.as_json:
        payload = build_base_payload(ctx, "resolve")
        payload.update(source=str(inputs.source), target=str(target), strategy=strategy)
        emit(payload, True)
    else:
        print(target)
    return OK
