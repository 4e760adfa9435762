from __future__ import annotations

import os

from .clock import utc_now


def make_run_id(prefix: str = "commentary") -> str:
    ts = utc_now().strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{ts}-{os.getpid()}"
