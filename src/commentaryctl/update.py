from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import CommentaryConfig
from .core.context import RunContext
from .core.fs import write_text_atomic
from .core.logging import log_event
from .document import SourceDocument
from .region import MarkerRegion, frame, locate_file
from .render import render
from .report import build_report


@dataclass(frozen=True)
class UpdatePlan:
    target: Path
    region: MarkerRegion
    replacement: str

    @property
    def changed(self) -> bool:
        return self.region.content != self.replacement

    @property
    def new_text(self) -> str:
        return self.region.replace(self.replacement)


def plan_update(document: SourceDocument, target: Path, config: CommentaryConfig | None = None) -> UpdatePlan:
    cfg = config or CommentaryConfig()
    block = render(document, cfg)
    region = locate_file(target, cfg)
    return UpdatePlan(target=target, region=region, replacement=frame(block, region.newline))


def preview(document: SourceDocument, config: CommentaryConfig | None = None) -> str:
    """Text `update` would place between the markers."""
    return frame(render(document, config or CommentaryConfig()))


def update(
    document: SourceDocument,
    target: Path,
    config: CommentaryConfig | None = None,
    *,
    ctx: RunContext | None = None,
) -> UpdatePlan:
    """Rewrite the commentary region of `target`; returns the plan that was applied."""
    plan = plan_update(document, target, config)
    if not plan.changed:
        log_event(ctx, "info", "update", "unchanged", target=target.name)
        return plan
    write_text_atomic(target, plan.new_text)
    log_event(ctx, "info", "update", "written", target=target.name, bytes=len(plan.replacement))
    return plan


def dry_run(
    document: SourceDocument,
    target: Path,
    config: CommentaryConfig | None = None,
    *,
    source_label: str | None = None,
) -> str:
    """Diff report of what `update` would change; empty when already in sync."""
    cfg = config or CommentaryConfig()
    plan = plan_update(document, target, cfg)
    if not plan.changed:
        return ""
    return build_report(
        plan.region.content,
        plan.replacement,
        source_label=source_label or document.label,
        target_name=target.name,
        diff_program=cfg.diff_program,
    ).text
