"""Locating the commentary region of a target file.

The region is made of the full lines strictly between the first
commentary marker line and the first code marker line after it. Offsets
index into the file text as read, so splicing a replacement in leaves every
byte outside the region untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .config import CommentaryConfig
from .core.errors import MissingCodeMarker, MissingCommentaryMarker, TargetReadError
from .core.fs import read_text
from .render import RenderedBlock


@dataclass(frozen=True)
class MarkerRegion:
    start: int
    end: int
    text: str

    @property
    def content(self) -> str:
        return self.text[self.start : self.end]

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end

    @property
    def newline(self) -> str:
        return "\r\n" if self.text[: self.start].endswith("\r\n") else "\n"

    def replace(self, new_content: str) -> str:
        return self.text[: self.start] + new_content + self.text[self.end :]


def _lines(text: str) -> Iterator[tuple[int, str]]:
    # str.splitlines would also split on form feeds, which Lisp files use as page breaks
    offset = 0
    while offset < len(text):
        newline = text.find("\n", offset)
        stop = len(text) if newline == -1 else newline + 1
        yield offset, text[offset:stop]
        offset = stop


def _bare(line: str) -> str:
    return line.rstrip("\n").rstrip("\r")


def locate(text: str, config: CommentaryConfig | None = None, label: str = "<text>") -> MarkerRegion:
    cfg = config or CommentaryConfig()
    start: int | None = None
    for offset, line in _lines(text):
        bare = _bare(line)
        if start is None:
            if bare == cfg.commentary_marker:
                start = offset + len(line)
        elif bare == cfg.code_marker:
            return MarkerRegion(start=start, end=max(offset, start), text=text)
    if start is None:
        raise MissingCommentaryMarker(label, cfg.commentary_marker)
    raise MissingCodeMarker(label, cfg.code_marker)


def read_target(path: Path) -> str:
    try:
        return read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise TargetReadError(path, str(exc)) from exc


def locate_file(path: Path, config: CommentaryConfig | None = None) -> MarkerRegion:
    return locate(read_target(path), config, label=path.name)


def frame(block: RenderedBlock, newline: str = "\n") -> str:
    """Region text for `block`: one blank separator line, then the block."""
    return newline + "".join(f"{line}{newline}" for line in block.lines)
