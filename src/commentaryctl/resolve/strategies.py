"""Candidate-producing strategies for target file resolution.

Each strategy lazily yields fully-qualified paths to try; it never checks
existence itself. A strategy with `must_exist = False` yields paths the
resolver accepts without an existence check. Strategies are consulted in the order of
`DEFAULT_STRATEGIES`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Protocol

from ..config import CommentaryConfig
from ..document import SourceDocument, infer_target_name


@dataclass(frozen=True)
class ResolveRequest:
    document: SourceDocument
    project_root: Path
    cwd: Path
    explicit: str | None = None
    hint: str | None = None
    override: str | None = None
    config: CommentaryConfig = field(default_factory=CommentaryConfig)


class CandidateStrategy(Protocol):
    name: str
    must_exist: bool

    def candidates(self, request: ResolveRequest) -> Iterator[Path]: ...


def with_extension(name: str, extension: str) -> str:
    return name if name.endswith(extension) else name + extension


def expand(name: str, request: ResolveRequest) -> Iterator[Path]:
    path = Path(name)
    if path.is_absolute():
        yield path
        return
    for sub in request.config.search_dirs:
        base = request.project_root if sub in {"", "."} else request.project_root / sub
        yield base / path


class ExplicitPath:
    """Absolute paths are taken as given; relative ones only when they exist."""

    name = "explicit"
    must_exist = False

    def candidates(self, request: ResolveRequest) -> Iterator[Path]:
        if not request.explicit:
            return
        path = Path(request.explicit)
        if path.is_absolute():
            yield path
        elif (request.cwd / path).exists():
            yield request.cwd / path


class UserHint:
    name = "hint"
    must_exist = True

    def candidates(self, request: ResolveRequest) -> Iterator[Path]:
        if request.hint:
            yield from expand(request.hint, request)


class ConfiguredOverride:
    name = "override"
    must_exist = True

    def candidates(self, request: ResolveRequest) -> Iterator[Path]:
        if request.override:
            yield from expand(request.override, request)


class ProjectDirName:
    name = "project-name"
    must_exist = True

    def candidates(self, request: ResolveRequest) -> Iterator[Path]:
        yield from expand(with_extension(request.project_root.name, request.config.extension), request)


class DocumentHeading:
    name = "document-heading"
    must_exist = True

    def candidates(self, request: ResolveRequest) -> Iterator[Path]:
        yield from expand(infer_target_name(request.document, request.config.extension), request)


DEFAULT_STRATEGIES: tuple[CandidateStrategy, ...] = (
    ExplicitPath(),
    UserHint(),
    ConfiguredOverride(),
    ProjectDirName(),
    DocumentHeading(),
)
