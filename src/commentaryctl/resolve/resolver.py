from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from ..config import CommentaryConfig
from ..core.context import RunContext
from ..core.errors import NoTargetFileFound
from ..core.logging import log_event
from ..core.repo_root import project_root_for
from ..document import SourceDocument
from .strategies import DEFAULT_STRATEGIES, CandidateStrategy, ResolveRequest


@dataclass(frozen=True)
class Resolution:
    path: Path
    strategy: str
    tried: tuple[Path, ...]


def resolve(
    document: SourceDocument,
    explicit: str | None = None,
    hint: str | None = None,
    project_root: Path | None = None,
    *,
    override: str | None = None,
    config: CommentaryConfig | None = None,
    cwd: Path | None = None,
    ctx: RunContext | None = None,
    strategies: Sequence[CandidateStrategy] = DEFAULT_STRATEGIES,
) -> Resolution:
    """Return the first existing candidate, trying strategies in order.

    An override that exists nowhere is not an error; resolution just moves on
    to the next strategy. An absolute explicit path is returned unchecked, so a
    missing file surfaces when the target is read.
    """
    base = (cwd or Path.cwd()).resolve()
    root = project_root.resolve() if project_root is not None else project_root_for(document.path, base)
    request = ResolveRequest(
        document=document,
        project_root=root,
        cwd=base,
        explicit=explicit,
        hint=hint,
        override=override,
        config=config or CommentaryConfig(),
    )
    tried: list[Path] = []
    for strategy in strategies:
        for candidate in strategy.candidates(request):
            tried.append(candidate)
            if not getattr(strategy, "must_exist", True) or candidate.is_file():
                log_event(ctx, "info", "resolve", "target_found", strategy=strategy.name, path=candidate)
                return Resolution(path=candidate, strategy=strategy.name, tried=tuple(tried))
        log_event(ctx, "debug", "resolve", "strategy_exhausted", strategy=strategy.name, tried=len(tried))
    raise NoTargetFileFound(document.label, tried)
