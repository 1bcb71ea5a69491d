# tests/test_cli.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

import pytest

from asdev.cli import run_cli
from asdev.executor import REPORT_HEADER
from asdev.selector import SelectionError


def _write_json_config(path: Path, tasks: dict) -> None:
    path.write_text(json.dumps({"prompt": "Pick", "tasks": tasks}), encoding="utf-8")


def _no_menu(prompt: str, labels: Sequence[str]) -> int:
    raise AssertionError("menu must not be shown")


def test_direct_task_runs_and_reports(
    tmp_path: Path, helper, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "menu.json"
    log = tmp_path / "log.txt"
    _write_json_config(
        cfg,
        {
            "both": {
                "description": "Two at once",
                "command": f"{helper('append', log, 'a')} ; {helper('append', log, 'b')}",
            }
        },
    )

    code = run_cli(["--config", str(cfg), "both"], chooser=_no_menu)
    out = capsys.readouterr().out

    assert code == 0
    assert sorted(log.read_text(encoding="utf-8").splitlines()) == ["a", "b"]
    assert REPORT_HEADER in out
    assert out.count("OK ") == 2


def test_first_failure_sets_exit_code(
    tmp_path: Path, helper, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "menu.json"
    _write_json_config(
        cfg,
        {
            "mixed": {
                "description": "Mixed",
                "command": " ; ".join(
                    [helper("exit", 0), helper("sleep", 0.3, "exit", 4), helper("exit", 6)]
                ),
            }
        },
    )

    code = run_cli(["--config", str(cfg), "mixed"], chooser=_no_menu)
    lines = [line for line in capsys.readouterr().out.splitlines() if line]

    assert code == 4
    assert lines[0] == REPORT_HEADER
    assert lines[1].startswith("OK ")
    assert lines[2].startswith("FAIL ") and lines[2].endswith("exit code = 4")
    assert lines[3].startswith("FAIL ") and lines[3].endswith("exit code = 6")


def test_no_task_opens_menu(
    tmp_path: Path, helper, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "menu.json"
    _write_json_config(
        cfg,
        {
            "ok": {"description": "Succeeds", "command": helper("exit", 0)},
            "bad": {"description": "Fails", "command": helper("exit", 3)},
        },
    )
    calls = []

    def chooser(prompt: str, labels: Sequence[str]) -> int:
        calls.append((prompt, list(labels)))
        return 1

    code = run_cli(["--config", str(cfg)], chooser=chooser)

    assert code == 3
    assert calls == [("Pick", ["Succeeds", "Fails"])]


def test_unknown_task_opens_menu(tmp_path: Path, helper) -> None:
    cfg = tmp_path / "menu.json"
    _write_json_config(cfg, {"ok": {"description": "Succeeds", "command": helper("exit", 0)}})
    calls = []

    def chooser(prompt: str, labels: Sequence[str]) -> int:
        calls.append(prompt)
        return 0

    assert run_cli(["--config", str(cfg), "nope"], chooser=chooser) == 0
    assert calls == ["Pick"]


def test_cancelled_menu_returns_130(
    tmp_path: Path, helper, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "menu.json"
    _write_json_config(cfg, {"ok": {"description": "Succeeds", "command": helper("exit", 0)}})

    def chooser(prompt: str, labels: Sequence[str]) -> int:
        raise SelectionError("Selection cancelled")

    code = run_cli(["--config", str(cfg)], chooser=chooser)

    assert code == 130
    assert "cancelled" in capsys.readouterr().err


def test_missing_program_returns_2(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "menu.json"
    _write_json_config(
        cfg, {"x": {"description": "Broken", "command": "asdev-no-such-program-xyz"}}
    )

    code = run_cli(["--config", str(cfg), "x"], chooser=_no_menu)
    captured = capsys.readouterr()

    assert code == 2
    assert "asdev-no-such-program-xyz" in captured.err
    assert REPORT_HEADER not in captured.out


def test_invalid_config_path_returns_2(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = run_cli(["--config", str(tmp_path / "missing.json"), "x"], chooser=_no_menu)

    assert code == 2
    assert capsys.readouterr().err != ""


def test_help_lists_default_tasks_with_versions(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    build_cfg = tmp_path / "build.yml"
    build_cfg.write_text('libraryVersion: "1.2.3"\n', encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        run_cli(["--build-config", str(build_cfg), "--help"])
    out = capsys.readouterr().out

    assert excinfo.value.code == 0
    for key in ("build", "verify_env", "release", "release-patch", "help"):
        assert key in out
    assert "Prepare a major release 2.0.0" in out
    assert "Prepare a patch release 1.2.4" in out


def test_help_without_build_config_still_lists_release(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit):
        run_cli(["--build-config", str(tmp_path / "missing.yml"), "-h"])
    out = capsys.readouterr().out

    assert "release-major" in out
    assert "Prepare a major release\n" in out


def test_help_survives_unreadable_build_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    build_cfg = tmp_path / "build.yml"
    build_cfg.write_bytes(b"libraryVersion: \xff\xfe1.2.3\n")

    with pytest.raises(SystemExit) as excinfo:
        run_cli(["--build-config", str(build_cfg), "-h"])

    assert excinfo.value.code == 0
    assert "release-major" in capsys.readouterr().out


def test_unknown_log_level_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_cli(["--log-level", "basic_format", "build"], chooser=_no_menu)

    assert excinfo.value.code == 2
