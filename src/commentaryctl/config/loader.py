from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import ConfigError
from ..core.fs import write_text_atomic
from ..core.schema import schema_errors, schema_path

CONFIG_FILENAME = ".commentaryctl.yml"
TARGET_ENV = "COMMENTARYCTL_TARGET"


@dataclass(frozen=True)
class CommentaryConfig:
    width: int = 75
    comment_prefix: str = ";;"
    commentary_marker: str = ";;; Commentary:"
    code_marker: str = ";;; Code:"
    extension: str = ".el"
    search_dirs: tuple[str, ...] = (".", "lisp", "src")
    target: str | None = None
    source: str | None = None
    diff_program: str | None = None

    def with_target(self, target: str | None) -> "CommentaryConfig":
        return replace(self, target=target)


def config_file_for(project_root: Path, explicit: Path | None = None) -> Path:
    return explicit if explicit is not None else project_root / CONFIG_FILENAME


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigError(f"{path}: cannot read config: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: root must be a mapping")
    return data


def load_config(project_root: Path, explicit: Path | None = None) -> CommentaryConfig:
    """Load the project config, falling back to defaults when no file exists.

    An explicitly requested config file must exist. The `COMMENTARYCTL_TARGET`
    environment variable overrides the persisted `target` key.
    """
    path = config_file_for(project_root, explicit)
    data: dict[str, Any] = {}
    if path.is_file():
        data = _read_yaml(path)
    elif explicit is not None:
        raise ConfigError(f"{path}: config file not found")
    errors = schema_errors(data, schema_path("config"))
    if errors:
        raise ConfigError(f"{path}: invalid config: " + "; ".join(errors))
    if "search_dirs" in data:
        data["search_dirs"] = tuple(data["search_dirs"])
    cfg = CommentaryConfig(**data)
    env_target = os.environ.get(TARGET_ENV)
    if env_target:
        cfg = cfg.with_target(env_target)
    return cfg


def save_target(project_root: Path, target: str, explicit: Path | None = None) -> Path:
    path = config_file_for(project_root, explicit)
    data = _read_yaml(path) if path.is_file() else {}
    data["target"] = target
    errors = schema_errors(data, schema_path("config"))
    if errors:
        raise ConfigError(f"{path}: invalid config: " + "; ".join(errors))
    return write_text_atomic(path, yaml.safe_dump(data, sort_keys=True, default_flow_style=False))
