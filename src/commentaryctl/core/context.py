from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .run_id import make_run_id

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    cwd: Path
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool
    config_path: Path | None = None

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        cwd: str | None = None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
        config_path: str | None = None,
    ) -> "RunContext":
        resolved_cwd = Path(cwd).resolve() if cwd else Path.cwd().resolve()
        resolved_run_id = run_id or os.environ.get("COMMENTARYCTL_RUN_ID") or make_run_id()
        raw_config = config_path or os.environ.get("COMMENTARYCTL_CONFIG")
        resolved_config: Path | None = None
        if raw_config:
            candidate = Path(raw_config)
            resolved_config = candidate if candidate.is_absolute() else (resolved_cwd / candidate)
        return cls(
            run_id=resolved_run_id,
            cwd=resolved_cwd,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
            config_path=resolved_config,
        )

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"
