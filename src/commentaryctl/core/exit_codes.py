from __future__ import annotations

import json
from pathlib import Path

ERROR_REGISTRY = Path(__file__).resolve().parents[1] / "resources" / "error-registry.json"


def _load_registry() -> dict[str, int]:
    payload = json.loads(ERROR_REGISTRY.read_text(encoding="utf-8"))
    mapping: dict[str, int] = {}
    for row in payload.get("codes", []):
        mapping[str(row["name"])] = int(row["code"])
    return mapping


_REG = _load_registry()

OK = _REG["COMMENTARY_OK"]
ERR_MISMATCH = _REG["COMMENTARY_ERR_MISMATCH"]
ERR_USAGE = _REG["COMMENTARY_ERR_USAGE"]
ERR_CONFIG = _REG["COMMENTARY_ERR_CONFIG"]
ERR_SOURCE = _REG["COMMENTARY_ERR_SOURCE"]
ERR_TARGET = _REG["COMMENTARY_ERR_TARGET"]
ERR_RESOLVE = _REG["COMMENTARY_ERR_RESOLVE"]
ERR_INTERNAL = _REG["COMMENTARY_ERR_INTERNAL"]
