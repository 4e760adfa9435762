from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from .errors import ScriptError
from .exit_codes import ERR_CONFIG

DEFAULT_TIMEOUT_S = 60


@dataclass(frozen=True)
class CommandResult:
    cmd: tuple[str, ...]
    code: int
    stdout: str
    stderr: str
    duration_ms: int

    @property
    def combined_output(self) -> str:
        return (self.stdout + self.stderr).strip()


def run_command(cmd: list[str], cwd: Path, timeout: float = DEFAULT_TIMEOUT_S) -> CommandResult:
    started = time.monotonic()
    try:
        proc = subprocess.run(cmd, cwd=cwd, text=True, capture_output=True, check=False, timeout=timeout)
    except FileNotFoundError as exc:
        raise ScriptError(f"program not found: {cmd[0]}", ERR_CONFIG, kind="program_not_found") from exc
    except subprocess.TimeoutExpired as exc:
        raise ScriptError(f"{cmd[0]} timed out after {timeout}s", ERR_CONFIG, kind="program_timeout") from exc
    return CommandResult(
        cmd=tuple(cmd),
        code=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
        duration_ms=int((time.monotonic() - started) * 1000),
    )
