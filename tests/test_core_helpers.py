from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest

from commentaryctl.core.context import RunContext
from commentaryctl.core.errors import ScriptError
from commentaryctl.core.exit_codes import (
    ERR_CONFIG,
    ERR_INTERNAL,
    ERR_MISMATCH,
    ERR_RESOLVE,
    ERR_SOURCE,
    ERR_TARGET,
    ERR_USAGE,
    OK,
)
from commentaryctl.core.fs import read_text, write_text_atomic
from commentaryctl.core.logging import log_event
from commentaryctl.core.process import run_command
from commentaryctl.core.repo_root import find_project_root, project_root_for


def _ctx(tmp_path: Path, **kwargs: object) -> RunContext:
    return RunContext.from_args(run_id="test-run", cwd=str(tmp_path), **kwargs)


def test_exit_codes_are_distinct() -> None:
    codes = [OK, ERR_MISMATCH, ERR_USAGE, ERR_CONFIG, ERR_SOURCE, ERR_TARGET, ERR_RESOLVE, ERR_INTERNAL]
    assert len(set(codes)) == len(codes)
    assert OK == 0
    assert ERR_USAGE == 2


def test_script_error_str_is_message() -> None:
    err = ScriptError("boom", ERR_CONFIG, kind="x")
    assert str(err) == "boom"
    assert err.code == ERR_CONFIG


def test_log_event_text(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_event(_ctx(tmp_path), "info", "check", "match", target="pkg.el")
    err = capsys.readouterr().err
    assert "level=info run_id=test-run component=check action=match target=pkg.el" in err


def test_log_event_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_event(_ctx(tmp_path, log_json=True), "info", "update", "written", path=tmp_path)
    payload = json.loads(capsys.readouterr().err)
    assert payload["component"] == "update"
    assert payload["path"] == str(tmp_path)
    assert payload["run_id"] == "test-run"


def test_log_event_levels(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_event(_ctx(tmp_path), "debug", "c", "a")
    log_event(_ctx(tmp_path, quiet=True), "info", "c", "a")
    log_event(None, "error", "c", "a")
    assert capsys.readouterr().err == ""
    log_event(_ctx(tmp_path, verbose=True), "debug", "c", "a")
    log_event(_ctx(tmp_path, quiet=True), "error", "c", "b")
    assert len(capsys.readouterr().err.splitlines()) == 2


def test_context_config_path_is_relative_to_cwd(tmp_path: Path) -> None:
    ctx = _ctx(tmp_path, config_path="conf.yml")
    assert ctx.config_path == tmp_path / "conf.yml"
    assert not ctx.as_json


def test_find_project_root(tmp_path: Path) -> None:
    (tmp_path / "pkg" / ".git").mkdir(parents=True)
    nested = tmp_path / "pkg" / "docs" / "deep"
    nested.mkdir(parents=True)
    assert find_project_root(nested) == tmp_path / "pkg"
    (tmp_path / "pkg" / "docs" / "README.md").write_text("x", encoding="utf-8")
    assert project_root_for(tmp_path / "pkg" / "docs" / "README.md", tmp_path) == tmp_path / "pkg"


def test_project_root_falls_back_to_document_directory(tmp_path: Path) -> None:
    doc = tmp_path / "loose" / "README.md"
    doc.parent.mkdir()
    doc.write_text("x", encoding="utf-8")
    assert project_root_for(doc, tmp_path) in {doc.parent, *doc.parents}


def test_write_text_atomic_preserves_mode(tmp_path: Path) -> None:
    path = tmp_path / "pkg.el"
    path.write_text("old\r\n", encoding="utf-8", newline="")
    os.chmod(path, 0o640)
    write_text_atomic(path, "new\r\n")
    assert read_text(path) == "new\r\n"
    assert stat.S_IMODE(path.stat().st_mode) == 0o640
    assert [p.name for p in tmp_path.iterdir()] == ["pkg.el"]


def test_run_command_captures_output(tmp_path: Path) -> None:
    res = run_command(["sh", "-c", "echo ok"], tmp_path)
    assert res.code == 0
    assert res.stdout.strip() == "ok"
    assert res.duration_ms >= 0


def test_run_command_reports_missing_program(tmp_path: Path) -> None:
    with pytest.raises(ScriptError) as exc:
        run_command(["commentaryctl-no-such-program"], tmp_path)
    assert exc.value.kind == "program_not_found"
    assert exc.value.code == ERR_CONFIG
