from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

from commentaryctl.core.schema import schema_path, validate_json

ROOT = Path(__file__).resolve().parents[1]


def run_commentaryctl(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), env.get("PYTHONPATH", "")]))
    env.setdefault("COMMENTARYCTL_RUN_ID", "pytest-run")
    return subprocess.run(
        [sys.executable, "-m", "commentaryctl", *args],
        cwd=(cwd or ROOT),
        env=env,
        text=True,
        capture_output=True,
        check=False,
    )


def load_output(text: str) -> dict[str, object]:
    payload = json.loads(text)
    validate_json(payload, schema_path("output"))
    return payload
