from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from hypothesis import HealthCheck, settings

_ALLOWED_MARKERS = {"unit", "integration"}

settings.register_profile(
    "commentary",
    deadline=None,
    max_examples=60,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("commentary")

TARGET_TEMPLATE = """\
;;; {name} --- Sample package  -*- lexical-binding: t -*-

;; Author: Someone

;;; Commentary:
{region};;; Code:

(provide '{stem})
;;; {name} ends here
"""


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_target_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COMMENTARYCTL_TARGET", raising=False)
    monkeypatch.delenv("COMMENTARYCTL_CONFIG", raising=False)
    monkeypatch.delenv("COMMENTARYCTL_RUN_ID", raising=False)


def target_text(name: str, region: str = "\n;; Old text.\n") -> str:
    return TARGET_TEMPLATE.format(name=name, stem=name.removesuffix(".el"), region=region)


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    def _make(
        name: str = "pkg",
        readme: str = "# pkg\n\nHello world.\n",
        targets: dict[str, str] | None = None,
    ) -> Path:
        root = tmp_path / name
        (root / ".git").mkdir(parents=True)
        (root / "README.md").write_text(readme, encoding="utf-8")
        for rel, region in (targets or {}).items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(target_text(path.name, region), encoding="utf-8")
        return root

    return _make
