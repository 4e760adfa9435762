"""Diff reports between current and freshly rendered commentary.

Both texts are materialized in a scratch directory and diffed there. The
raw diff therefore mentions scratch file names (and, for an external diff
program, timestamps); a fixed list of substitutions rewrites those into
stable labels afterwards, so two runs over the same inputs produce the same
report.
"""

from __future__ import annotations

import difflib
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .core.errors import ScriptError
from .core.exit_codes import ERR_INTERNAL
from .core.fs import read_text
from .core.process import run_command


@dataclass(frozen=True)
class Substitution:
    pattern: re.Pattern[str]
    replacement: str

    @classmethod
    def literal(cls, needle: str, replacement: str) -> "Substitution":
        return cls(re.compile(re.escape(needle)), replacement.replace("\\", "\\\\"))

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class DiffReport:
    raw: str
    substitutions: tuple[Substitution, ...]

    @property
    def text(self) -> str:
        out = self.raw
        for sub in self.substitutions:
            out = sub.apply(out)
        return out


# anchored to the two file header lines; hunk bodies may start with "--- " too
HEADER_TIMESTAMP = Substitution(
    re.compile(r"\A--- ([^\t\n]*)(?:\t[^\n]*)?\n\+\+\+ ([^\t\n]*)(?:\t[^\n]*)?(?=\n|\Z)"),
    "--- \\1\n+++ \\2",
)


def exported_label(source_label: str) -> str:
    return f"<exported from {source_label}>"


def report_substitutions(current: Path, expected: Path, source_label: str, target_name: str) -> tuple[Substitution, ...]:
    return (
        HEADER_TIMESTAMP,
        Substitution.literal(str(expected), exported_label(source_label)),
        Substitution.literal(str(current), target_name),
    )


def _split(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _difflib_diff(current: Path, expected: Path) -> str:
    diff = difflib.unified_diff(
        _split(read_text(current)),
        _split(read_text(expected)),
        fromfile=str(current),
        tofile=str(expected),
        lineterm="",
    )
    return "\n".join(diff) + "\n"


def _program_diff(program: str, current: Path, expected: Path) -> str:
    result = run_command([program, "-u", str(current), str(expected)], cwd=current.parent)
    # diff(1) exits 1 when the inputs differ and >1 on trouble
    if result.code > 1:
        raise ScriptError(f"{program} failed: {result.combined_output}", ERR_INTERNAL, kind="diff_failed")
    return result.stdout


def build_report(
    current_text: str,
    expected_text: str,
    *,
    source_label: str,
    target_name: str,
    diff_program: str | None = None,
) -> DiffReport:
    with tempfile.TemporaryDirectory(prefix="commentaryctl-") as scratch:
        root = Path(scratch)
        current = root / f"current-{target_name}"
        expected = root / f"expected-{target_name}"
        current.write_text(current_text, encoding="utf-8", newline="")
        expected.write_text(expected_text, encoding="utf-8", newline="")
        if diff_program:
            raw = _program_diff(diff_program, current, expected)
        else:
            raw = _difflib_diff(current, expected)
        return DiffReport(raw=raw, substitutions=report_substitutions(current, expected, source_label, target_name))
