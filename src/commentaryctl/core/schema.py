from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

RESOURCES = Path(__file__).resolve().parents[1] / "resources"


def load_json(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def schema_path(name: str) -> Path:
    return RESOURCES / f"{name}.schema.json"


def validate_json(payload: Any, schema: Path) -> None:
    jsonschema.validate(payload, load_json(schema))


def schema_errors(payload: Any, schema: Path) -> list[str]:
    validator = jsonschema.Draft202012Validator(load_json(schema))
    errors: list[str] = []
    for err in sorted(validator.iter_errors(payload), key=lambda e: list(e.absolute_path)):
        where = "/".join(str(part) for part in err.absolute_path) or "<root>"
        errors.append(f"{where}: {err.message}")
    return errors
