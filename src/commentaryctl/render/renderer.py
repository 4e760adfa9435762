from __future__ import annotations

from dataclasses import dataclass

from markdown_it.tree import SyntaxTreeNode

from ..config import CommentaryConfig
from ..core.errors import ExportFailure
from ..document import SourceDocument, heading_level
from .exporter import PlainTextExporter


@dataclass(frozen=True)
class RenderedBlock:
    """Comment-prefixed commentary lines, without line terminators."""

    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def strip_title(nodes: list[SyntaxTreeNode]) -> list[SyntaxTreeNode]:
    """Drop the first level-1 heading; the blocks after it are kept."""
    for index, node in enumerate(nodes):
        if node.type == "heading" and heading_level(node) == 1:
            return nodes[:index] + nodes[index + 1 :]
    return list(nodes)


def prefix_line(line: str, prefix: str) -> str:
    if not line.strip():
        return prefix
    return f"{prefix} {line}"


def render(document: SourceDocument, config: CommentaryConfig | None = None) -> RenderedBlock:
    cfg = config or CommentaryConfig()
    exporter = PlainTextExporter(width=cfg.width)
    body = exporter.export(strip_title(document.blocks))
    if not body.strip():
        raise ExportFailure(document.label)
    lines = tuple(prefix_line(line, cfg.comment_prefix) for line in body.split("\n"))
    return RenderedBlock(lines=lines)
