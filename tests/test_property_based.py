from __future__ import annotations

from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

from commentaryctl.check import Match, check
from commentaryctl.document import parse_document
from commentaryctl.region import locate, locate_file
from commentaryctl.render import render
from commentaryctl.update import update

_WORDS = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12)
_PARAGRAPHS = st.lists(st.lists(_WORDS, min_size=1, max_size=40).map(" ".join), min_size=1, max_size=5)
_CODE = st.lists(st.text(alphabet="abc ()'-", max_size=30), min_size=1, max_size=5)


def _markdown(title: str, paragraphs: list[str], code: list[str]) -> str:
    body = "\n\n".join(paragraphs)
    fence = "\n".join(line.rstrip() for line in code)
    return f"# {title}\n\n{body}\n\n```\n{fence}\n```\n\n## {title} usage\n\n- {paragraphs[0]}\n"


@given(title=_WORDS, paragraphs=_PARAGRAPHS, code=_CODE)
def test_render_is_idempotent_and_well_formed(title: str, paragraphs: list[str], code: list[str]) -> None:
    markdown = _markdown(title, paragraphs, code)
    first = render(parse_document(markdown))
    second = render(parse_document(markdown))
    assert first == second
    for line in first.lines:
        assert line == ";;" or line.startswith(";; ")
        assert line.strip() != ";;" or line == ";;"


@given(paragraphs=_PARAGRAPHS)
def test_prose_respects_width(paragraphs: list[str]) -> None:
    block = render(parse_document("# t\n\n" + "\n\n".join(paragraphs) + "\n"))
    assert all(len(line) <= 75 + 3 for line in block.lines)
    rendered_words = " ".join(line[3:] for line in block.lines).split()
    assert rendered_words == " ".join(paragraphs).split()


@given(
    before=st.lists(st.sampled_from(["(a)", ";; b", "", "\x0c"]), max_size=4),
    inside=st.lists(st.sampled_from(["x", ";; y", "", ";;; Commentary:"]), max_size=4),
    after=st.lists(st.sampled_from(["(c)", ";;; Code:", ""]), max_size=4),
)
def test_locate_returns_ordered_line_aligned_region(before: list[str], inside: list[str], after: list[str]) -> None:
    lines = [*before, ";;; Commentary:", *inside, ";;; Code:", *after]
    text = "".join(f"{line}\n" for line in lines)
    region = locate(text)
    assert region.start <= region.end
    assert region.start == 0 or text[region.start - 1] == "\n"
    assert text[region.end :].startswith(";;; Code:\n")


@given(paragraphs=_PARAGRAPHS, old=st.lists(_WORDS, max_size=5))
def test_update_then_check_round_trip(tmp_path_factory, paragraphs: list[str], old: list[str]) -> None:
    target: Path = tmp_path_factory.mktemp("rt") / "pkg.el"
    stale = "".join(f";; {word}\n" for word in old)
    target.write_text(f"(head)\n;;; Commentary:\n{stale};;; Code:\n(tail)\n", encoding="utf-8")
    doc = parse_document("# pkg\n\n" + "\n\n".join(paragraphs) + "\n")
    update(doc, target)
    assert isinstance(check(doc, target), Match)
    text = target.read_text(encoding="utf-8")
    assert text.startswith("(head)\n;;; Commentary:\n")
    assert text.endswith(";;; Code:\n(tail)\n")
    assert locate_file(target).content == "\n" + render(doc).text
