"""Plain-text export of a Markdown syntax tree.

Blocks are separated by one blank line, prose is reflowed to a fixed width,
and code blocks are reproduced line for line. The result carries no leading
or trailing blank lines.
"""

from __future__ import annotations

import textwrap
from typing import Iterable

from markdown_it.tree import SyntaxTreeNode

MIN_WIDTH = 10

_HEADING_RULES = {2: "=", 3: "-"}


class PlainTextExporter:
    def __init__(self, width: int = 75) -> None:
        self.width = width

    def export(self, nodes: Iterable[SyntaxTreeNode]) -> str:
        lines = self._blocks(list(nodes), self.width)
        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()
        return "\n".join(line.rstrip() if not line.strip() else line for line in lines)

    def _blocks(self, nodes: list[SyntaxTreeNode], width: int, tight: bool = False) -> list[str]:
        out: list[str] = []
        for node in nodes:
            rendered = self._block(node, width)
            if not rendered:
                continue
            if out and not tight:
                out.append("")
            out.extend(rendered)
        return out

    def _block(self, node: SyntaxTreeNode, width: int) -> list[str]:
        kind = node.type
        if kind == "heading":
            return self._heading(node, width)
        if kind == "paragraph":
            return self._prose(self._inline_children(node), width)
        if kind in {"fence", "code_block"}:
            return node.content.rstrip("\n").split("\n") if node.content.strip("\n") else []
        if kind == "bullet_list":
            return self._list(node, width, ordered=False)
        if kind == "ordered_list":
            return self._list(node, width, ordered=True)
        if kind == "blockquote":
            inner = self._blocks(node.children, max(width - 2, MIN_WIDTH))
            return [f"  {line}" if line else "" for line in inner]
        if kind == "hr":
            return ["-" * width]
        if kind == "table":
            return self._table(node)
        if kind == "html_block":
            return []
        if node.children:
            return self._blocks(node.children, width)
        return node.content.rstrip("\n").split("\n") if node.content else []

    def _heading(self, node: SyntaxTreeNode, width: int) -> list[str]:
        lines = self._prose(self._inline_children(node), width)
        if not lines:
            return []
        rule = _HEADING_RULES.get(int(node.tag[1:]))
        if rule is not None:
            lines.append(rule * max(len(line) for line in lines))
        return lines

    def _list(self, node: SyntaxTreeNode, width: int, ordered: bool) -> list[str]:
        start = int(node.attrs.get("start", 1)) if ordered else 1
        items = [child for child in node.children if child.type == "list_item"]
        tight = all(
            getattr(grand, "hidden", False)
            for item in items
            for grand in item.children
            if grand.type == "paragraph"
        )
        out: list[str] = []
        for index, item in enumerate(items):
            marker = f"{start + index}. " if ordered else "- "
            pad = " " * len(marker)
            body = self._blocks(item.children, max(width - len(marker), MIN_WIDTH), tight=tight)
            if out and not tight:
                out.append("")
            if not body:
                out.append(marker.rstrip())
                continue
            out.append(marker + body[0])
            out.extend(pad + line if line else "" for line in body[1:])
        return out

    def _table(self, node: SyntaxTreeNode) -> list[str]:
        rows: list[list[str]] = []
        header_rows = 0
        for section in node.children:
            for row in section.children:
                rows.append([" ".join(self._inline_children(cell).split()) for cell in row.children])
            if section.type == "thead":
                header_rows = len(rows)
        if not rows:
            return []
        columns = max(len(row) for row in rows)
        widths = [0] * columns
        for row in rows:
            for col, cell in enumerate(row):
                widths[col] = max(widths[col], len(cell))
        lines: list[str] = []
        for index, row in enumerate(rows):
            cells = [(row[col] if col < len(row) else "").ljust(widths[col]) for col in range(columns)]
            lines.append(" | ".join(cells).rstrip())
            if header_rows and index == header_rows - 1:
                lines.append("-+-".join("-" * w for w in widths))
        return lines

    def _prose(self, text: str, width: int) -> list[str]:
        lines: list[str] = []
        for segment in text.split("\n"):
            words = " ".join(segment.split())
            if not words:
                continue
            lines.extend(
                textwrap.wrap(
                    words,
                    width=max(width, MIN_WIDTH),
                    break_long_words=False,
                    break_on_hyphens=False,
                )
            )
        return lines

    def _inline_children(self, node: SyntaxTreeNode) -> str:
        return "".join(self._inline(child) for child in node.children)

    def _inline(self, node: SyntaxTreeNode) -> str:
        kind = node.type
        if kind == "text":
            return node.content
        if kind == "softbreak":
            return " "
        if kind == "hardbreak":
            return "\n"
        if kind == "code_inline":
            return f"`{node.content}`"
        if kind == "em":
            return f"_{self._inline_children(node)}_"
        if kind == "strong":
            return f"*{self._inline_children(node)}*"
        if kind == "s":
            return f"+{self._inline_children(node)}+"
        if kind == "link":
            text = self._inline_children(node)
            href = str(node.attrs.get("href", ""))
            if f"mailto:{text}" == href:
                return f"<{text}>"
            if not text or text == href:
                return f"<{href}>"
            return f"{text} ({href})"
        if kind == "image":
            return node.content
        if kind == "html_inline":
            return ""
        return self._inline_children(node)


def export_plain_text(nodes: Iterable[SyntaxTreeNode], width: int = 75) -> str:
    return PlainTextExporter(width=width).export(nodes)
