from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from framegif.cli.framegif_cli import _fps_arg, main
from framegif.io.gif import read_gif_info

from conftest import RED, GREEN, BLUE


def _build(folder: Path, out: Path, *extra: str) -> int:
    return main(["build", str(folder), "-o", str(out), "--no-progress", *extra])


def test_build_and_inspect(write_frames, tmp_path: Path, capsys):
    write_frames([RED, RED, GREEN, BLUE])
    out = tmp_path / "cli.gif"

    assert _build(tmp_path / "frames", out, "--fps", "25") == 0
    printed = capsys.readouterr().out
    assert "[done]" in printed
    assert "4 input frames -> 3 stored frames" in printed
    assert read_gif_info(out).delays == [8, 4, 4]

    assert main(["inspect", str(out)]) == 0
    printed = capsys.readouterr().out
    assert "frames: 3" in printed
    assert "frame 0: 8 cs" in printed


def test_build_error_exit_code(tmp_path: Path, capsys):
    code = _build(tmp_path / "missing", tmp_path / "out.gif")
    assert code == 1
    assert "[error:source]" in capsys.readouterr().err


def test_inspect_error_exit_code(tmp_path: Path, capsys):
    bad = tmp_path / "bad.gif"
    bad.write_bytes(b"nope")
    assert main(["inspect", str(bad)]) == 1
    assert "[error:source]" in capsys.readouterr().err


@pytest.mark.parametrize(
    "text, value",
    [("25", 25), (" 2 5 ", 25), ("", 30), ("0", 0), (12, 12)],
)
def test_fps_arg(text, value):
    assert _fps_arg(text) == value


@pytest.mark.parametrize("text", ["abc", "2.5", "-3"])
def test_fps_arg_rejects(text):
    with pytest.raises(argparse.ArgumentTypeError):
        _fps_arg(text)


def test_bad_fps_is_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        _build(tmp_path, tmp_path / "out.gif", "--fps", "fast")
    assert excinfo.value.code == 2


def test_settings_file_supplies_defaults(write_frames, tmp_path: Path):
    write_frames([RED, RED, GREEN])
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"build": {"fps": 50, "jobs": 2}}), encoding="utf-8")
    out = tmp_path / "s.gif"

    code = main(["--settings", str(settings), "build", str(tmp_path / "frames"), "-o", str(out), "--no-progress"])
    assert code == 0
    assert read_gif_info(out).delays == [4, 2]


def test_command_line_beats_settings(write_frames, tmp_path: Path):
    write_frames([RED, GREEN])
    settings = tmp_path / "settings.csv"
    settings.write_text("key,value\nfps,50\n", encoding="utf-8")
    out = tmp_path / "s.gif"

    code = main([f"--settings={settings}", "build", str(tmp_path / "frames"), "-o", str(out), "--fps", "10", "--no-progress"])
    assert code == 0
    assert read_gif_info(out).delays == [10, 10]


def test_save_settings_round_trip(write_frames, tmp_path: Path):
    write_frames([RED])
    saved = tmp_path / "saved.json"
    out = tmp_path / "o.gif"

    assert _build(tmp_path / "frames", out, "--fps", "20", "--save-settings", str(saved)) == 0

    data = json.loads(saved.read_text(encoding="utf-8"))
    assert data["build"]["fps"] == 20
    assert data["build"]["progress"] is False
    assert data["build"]["output"] == str(out)
    assert "settings_path" not in data["build"]
