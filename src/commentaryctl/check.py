from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import CommentaryConfig
from .core.context import RunContext
from .core.errors import ExportFailure, GenerationFailure, MismatchError
from .core.logging import log_event
from .document import SourceDocument
from .region import frame, locate_file
from .render import render
from .report import build_report


@dataclass(frozen=True)
class Match:
    target: Path

    @property
    def matched(self) -> bool:
        return True


@dataclass(frozen=True)
class Mismatch:
    target: Path
    report: str

    @property
    def matched(self) -> bool:
        return False


CheckResult = Match | Mismatch


def check(
    document: SourceDocument,
    target: Path,
    config: CommentaryConfig | None = None,
    *,
    source_label: str | None = None,
    ctx: RunContext | None = None,
) -> CheckResult:
    """Compare the target's commentary region with a fresh rendering of `document`.

    Whitespace is significant. On mismatch the report is a unified diff from
    the current region to the expected text, with scratch file names replaced
    by the target's base name and `<exported from SOURCE>`.
    """
    cfg = config or CommentaryConfig()
    label = source_label or document.label
    try:
        block = render(document, cfg)
    except ExportFailure as exc:
        raise GenerationFailure(label) from exc
    region = locate_file(target, cfg)
    expected = frame(block, region.newline)
    if region.content == expected:
        log_event(ctx, "info", "check", "match", target=target.name, lines=len(block))
        return Match(target=target)
    report = build_report(
        region.content,
        expected,
        source_label=label,
        target_name=target.name,
        diff_program=cfg.diff_program,
    )
    log_event(ctx, "info", "check", "mismatch", target=target.name, source=label)
    return Mismatch(target=target, report=report.text)


def verify(
    document: SourceDocument,
    target: Path,
    config: CommentaryConfig | None = None,
    *,
    source_label: str | None = None,
    ctx: RunContext | None = None,
) -> Match:
    result = check(document, target, config, source_label=source_label, ctx=ctx)
    if isinstance(result, Mismatch):
        raise MismatchError(target, result.report)
    return result
