from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .exit_codes import (
    ERR_CONFIG,
    ERR_INTERNAL,
    ERR_MISMATCH,
    ERR_RESOLVE,
    ERR_SOURCE,
    ERR_TARGET,
    ERR_USAGE,
)


@dataclass
class ScriptError(Exception):
    message: str
    code: int = ERR_INTERNAL
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


class UsageError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_USAGE, kind="usage_error")


class ConfigError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_CONFIG, kind="config_error")


class MissingCommentaryMarker(ScriptError):
    def __init__(self, label: str, marker: str) -> None:
        super().__init__(f"{label}: no `{marker}` line found", ERR_TARGET, kind="missing_commentary_marker")
        self.label = label


class MissingCodeMarker(ScriptError):
    def __init__(self, label: str, marker: str) -> None:
        super().__init__(f"{label}: no `{marker}` line found after the commentary marker", ERR_TARGET, kind="missing_code_marker")
        self.label = label


class TargetReadError(ScriptError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: cannot read target file: {reason}", ERR_TARGET, kind="target_read_error")
        self.path = path


class EmptyDocument(ScriptError):
    def __init__(self, label: str) -> None:
        super().__init__(f"{label}: document has no heading to infer a target name from", ERR_SOURCE, kind="empty_document")
        self.label = label


class ExportFailure(ScriptError):
    def __init__(self, label: str) -> None:
        super().__init__(f"{label}: plain-text export produced no output", ERR_SOURCE, kind="export_failure")
        self.label = label


class GenerationFailure(ScriptError):
    def __init__(self, label: str) -> None:
        super().__init__(f"{label}: failed to generate commentary for comparison", ERR_SOURCE, kind="generation_failure")
        self.label = label


class NoTargetFileFound(ScriptError):
    def __init__(self, label: str, tried: list[Path]) -> None:
        detail = ", ".join(str(p) for p in tried) if tried else "no candidates"
        super().__init__(f"{label}: no target file found (tried: {detail})", ERR_RESOLVE, kind="no_target_file")
        self.label = label
        self.tried = list(tried)


class MismatchError(ScriptError):
    def __init__(self, target: Path, report: str) -> None:
        super().__init__(f"{target.name}: commentary is out of date\n{report}", ERR_MISMATCH, kind="commentary_mismatch")
        self.target = target
        self.report = report


class SourceReadError(ScriptError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: cannot read source document: {reason}", ERR_SOURCE, kind="source_read_error")
        self.path = path
