"""CLI payload output helpers."""

from __future__ import annotations

import json
from typing import Any

from ..core.context import RunContext

TOOL = "commentaryctl"


def dumps_json(payload: Any, pretty: bool = False) -> str:
    return json.dumps(payload, indent=2 if pretty else None, sort_keys=True)


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def build_base_payload(ctx: RunContext, command: str, status: str = "ok") -> dict[str, object]:
    return {
        "schema_name": f"{TOOL}.{command}.v1",
        "schema_version": 1,
        "tool": TOOL,
        "status": status,
        "run_id": ctx.run_id,
    }


def render_error(*, as_json: bool, message: str, code: int, kind: str, run_id: str = "") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_name": f"{TOOL}.error.v1",
                "schema_version": 1,
                "tool": TOOL,
                "status": "error",
                "run_id": run_id,
                "errors": [{"code": code, "kind": kind, "message": message}],
            }
        )
    return f"{TOOL}: {message}"
