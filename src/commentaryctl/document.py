"""Parsed Markdown source documents.

The parser is markdown-it-py with the CommonMark preset plus GFM tables and
strikethrough. Only read access to the resulting tree is needed downstream.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .core.errors import EmptyDocument
from .core.fs import read_text

DEFAULT_SOURCES = ("README.md", "README.markdown", "README")

_NAME_TOKEN_RE = re.compile(r"[^\s,;:!?()\[\]{}<>\"'`*|/#@=&~]+")


def _parser() -> MarkdownIt:
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


@dataclass(frozen=True)
class SourceDocument:
    tree: SyntaxTreeNode
    text: str
    path: Path | None = None
    label: str = field(default="")

    @property
    def blocks(self) -> list[SyntaxTreeNode]:
        return list(self.tree.children)

    def headings(self) -> list[SyntaxTreeNode]:
        return [node for node in self.tree.walk() if node.type == "heading"]


def parse_document(text: str, path: Path | None = None) -> SourceDocument:
    tree = SyntaxTreeNode(_parser().parse(text))
    label = path.name if path is not None else "<string>"
    return SourceDocument(tree=tree, text=text, path=path, label=label)


def load_document(path: Path) -> SourceDocument:
    return parse_document(read_text(path), path=path)


def default_source(cwd: Path) -> Path:
    for name in DEFAULT_SOURCES:
        candidate = cwd / name
        if candidate.is_file():
            return candidate
    return cwd / DEFAULT_SOURCES[0]


def heading_level(node: SyntaxTreeNode) -> int:
    return int(node.tag[1:])


def inline_plain(node: SyntaxTreeNode) -> str:
    """Concatenate the literal text under `node`, ignoring inline markup."""
    if node.type in {"text", "code_inline", "html_inline"}:
        return node.content
    if node.type in {"softbreak", "hardbreak"}:
        return " "
    if node.type == "image":
        return node.content
    return "".join(inline_plain(child) for child in node.children)


def infer_target_name(document: SourceDocument, extension: str) -> str:
    """First token of the first heading, with `extension` appended when missing."""
    headings = document.headings()
    if not headings:
        raise EmptyDocument(document.label)
    title = inline_plain(headings[0]).strip()
    match = _NAME_TOKEN_RE.search(title)
    if match is None:
        raise EmptyDocument(document.label)
    name = match.group(0).rstrip(".")
    if not name:
        raise EmptyDocument(document.label)
    if not name.endswith(extension):
        name += extension
    return name
