"""Tests for CLI parsing and dispatch."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from compaction_timeline import cli, logging_setup
from compaction_timeline.config import DisplayConfig


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch) -> None:
    monkeypatch.setattr(cli, "init_logging", lambda *_args, **_kwargs: 30)


def _write_files(path: Path, files: list[dict]) -> Path:
    path.write_text(json.dumps(files), encoding="utf-8")
    return path


@pytest.fixture
def files_path(tmp_path: Path) -> Path:
    return _write_files(
        tmp_path / "files.json",
        [
            {"id": 1, "level": "Initial", "min_time": 0, "max_time": 0},
            {"id": 2, "level": "Initial", "min_time": 0, "max_time": 0},
        ],
    )


def test_parse_defaults() -> None:
    args = cli.build_parser().parse_args(["files.json"])
    assert args.path == "files.json"
    assert args.title is None
    assert args.split is None
    assert args.color is None


def test_parse_no_color() -> None:
    args = cli.build_parser().parse_args(["files.json", "--no-color"])
    assert args.color is False


def test_resolve_config_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"heading_width": 30}), encoding="utf-8")
    args = cli.build_parser().parse_args(
        ["files.json", "--config", str(config_path), "--timeline-width", "40"]
    )
    assert cli._resolve_config(args) == DisplayConfig(
        heading_width=30, timeline_width=40
    )


def test_main_prints_plain_lines(files_path: Path, capsys) -> None:
    exit_code = cli.main([str(files_path), "--title", "display", "--no-color"])
    assert exit_code == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "display"
    assert out[1] == "L0, all files 1b".ljust(100)
    assert out[2].startswith("L0.1[0,0]           |---")
    assert len(out) == 4


def test_main_split(files_path: Path, tmp_path: Path, capsys) -> None:
    other = _write_files(
        tmp_path / "other.json",
        [{"id": 9, "level": "Final", "min_time": 5, "max_time": 10}],
    )
    exit_code = cli.main(
        [
            str(files_path),
            "--title",
            "before",
            "--split",
            str(other),
            "--split-title",
            "after",
            "--no-color",
        ]
    )
    assert exit_code == 0
    out = capsys.readouterr().out.splitlines()
    assert out[4] == "after"
    assert out[5] == "L2, all files 1b".ljust(100)
    assert out[6].startswith("L2.9[5,10]")


def test_main_color_keeps_text(files_path: Path, capsys) -> None:
    exit_code = cli.main([str(files_path), "--title", "display", "--color"])
    assert exit_code == 0
    assert "L0.1[0,0]" in capsys.readouterr().out


def test_main_reports_validation_error(tmp_path: Path, capsys) -> None:
    path = _write_files(
        tmp_path / "bad.json", [{"id": 4, "min_time": 9, "max_time": 1}]
    )
    exit_code = cli.main([str(path), "--no-color"])
    assert exit_code == 1
    assert "file 4 has min_time 9" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path: Path, capsys) -> None:
    exit_code = cli.main([str(tmp_path / "missing.json"), "--no-color"])
    assert exit_code == 1
    assert "missing.json" in capsys.readouterr().err


def test_main_rejects_bad_width(files_path: Path, capsys) -> None:
    exit_code = cli.main([str(files_path), "--timeline-width", "0", "--no-color"])
    assert exit_code == 1
    assert "timeline_width must be >= 1" in capsys.readouterr().err


def test_main_ignores_unusable_log_file(
    monkeypatch, files_path: Path, tmp_path: Path, capsys
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setattr(cli, "init_logging", logging_setup.init_logging)
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    root.handlers.clear()
    try:
        exit_code = cli.main(
            [str(files_path), "--no-color", "--log-file", str(blocker / "a.log")]
        )
    finally:
        for handler in root.handlers:
            if handler not in original_handlers:
                handler.close()
        root.handlers = original_handlers
        root.setLevel(original_level)
    assert exit_code == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines()[0] == "L0, all files 1b".ljust(100)
    assert "Cannot open log file" in captured.err
