# src/framegif/cli/settings.py
"""
Option defaults from settings files.

A settings file is either

- JSON: an object of ``{option_dest: value}``, or an object keyed by
  sub-command (``{"build": {...}, "default": {...}}``), or
- CSV: two columns ``key,value`` (optional header row); values are decoded
  as JSON when possible (``25`` -> int, ``"x"`` -> str, ``true`` -> bool).

Loaded values replace argparse defaults, so explicit command-line flags
still win.
"""
from __future__ import annotations

import argparse
import csv
import json
from pathlib import Path
from typing import Any, Iterable

__all__ = [
    "SETTINGS_FLAGS",
    "add_settings_args",
    "strip_settings_args",
    "detect_command",
    "load_settings",
    "save_settings",
    "select_settings",
    "apply_settings_to_parser",
    "serialize_args",
    "find_subparser",
]

SETTINGS_FLAGS = {"--settings": "settings_path", "--save-settings": "save_settings_path"}

# dests that describe the invocation rather than an option value
_NOT_SAVED = {"settings_path", "save_settings_path", "command", "func", "help", "version"}


def add_settings_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--settings",
        dest="settings_path",
        default=None,
        help="Load option defaults from a settings file (json or csv).",
    )
    parser.add_argument(
        "--save-settings",
        dest="save_settings_path",
        default=None,
        help="Save the effective option values to a settings file (json or csv).",
    )


def strip_settings_args(
    argv: Iterable[str],
) -> tuple[list[str], str | None, str | None]:
    """
    Pull ``--settings``/``--save-settings`` out of ``argv`` wherever they
    appear, so they can be handled before the real parse.
    """
    found: dict[str, str | None] = {dest: None for dest in SETTINGS_FLAGS.values()}
    cleaned: list[str] = []

    args = list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        flag, eq, value = arg.partition("=")
        if flag in SETTINGS_FLAGS:
            if not eq:
                if i + 1 >= len(args):
                    raise SystemExit(f"{flag} requires a path.")
                value = args[i + 1]
                i += 1
            found[SETTINGS_FLAGS[flag]] = value
        else:
            cleaned.append(arg)
        i += 1

    return cleaned, found["settings_path"], found["save_settings_path"]


def detect_command(argv: Iterable[str]) -> str | None:
    for arg in argv:
        if not arg.startswith("-"):
            return arg
    return None


def _decode_value(raw: str) -> Any:
    text = raw.strip()
    if text == "":
        return ""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _is_header(row: list[str]) -> bool:
    return (
        len(row) > 1
        and row[0].strip().lower() in {"key", "name"}
        and row[1].strip().lower() in {"value", "val"}
    )


def _load_csv(path: Path) -> dict[str, Any]:
    data: dict[str, Any] = {}
    with path.open("r", newline="", encoding="utf-8") as handle:
        for row in csv.reader(handle):
            if not row or not row[0].strip() or _is_header(row):
                continue
            key = row[0].strip()
            data[key] = _decode_value(row[1]) if len(row) > 1 else ""
    return data


def _save_csv(path: Path, data: dict[str, Any]) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(["key", "value"])
        for key in sorted(data):
            writer.writerow([key, json.dumps(data[key], ensure_ascii=True)])


def load_settings(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise SystemExit(f"Settings file not found: {path}")
    if path.suffix.lower() == ".csv":
        return _load_csv(path)

    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise SystemExit(f"Settings file is not valid JSON: {path} ({exc})")
    if not isinstance(data, dict):
        raise SystemExit(f"Settings file must be a JSON object: {path}")
    return data


def save_settings(
    path: Path,
    settings: dict[str, Any],
    *,
    command: str | None = None,
) -> None:
    """
    Write ``settings``; for JSON with a ``command``, merge them under that
    sub-command key, keeping other sections already in the file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".csv":
        _save_csv(path, settings)
        return

    data: dict[str, Any] = settings
    if command:
        existing: dict[str, Any] = {}
        if path.exists():
            try:
                existing = load_settings(path)
            except SystemExit:
                existing = {}
        if existing and all(not isinstance(v, dict) for v in existing.values()):
            existing = {"default": existing}
        existing[command] = settings
        data = existing

    with path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, sort_keys=True, ensure_ascii=True)
        handle.write("\n")


def select_settings(data: dict[str, Any], command: str | None) -> dict[str, Any]:
    """Pick the section for ``command``, else ``default``, else a flat file."""
    if command and isinstance(data.get(command), dict):
        return dict(data[command])
    if isinstance(data.get("default"), dict):
        return dict(data["default"])
    if all(not isinstance(v, dict) for v in data.values()):
        return dict(data)
    return {}


def _option_actions(parser: argparse.ArgumentParser) -> list[argparse.Action]:
    return [a for a in parser._actions if a.option_strings and a.dest not in _NOT_SAVED]


def apply_settings_to_parser(
    parser: argparse.ArgumentParser,
    settings: dict[str, Any],
) -> None:
    for action in _option_actions(parser):
        if action.dest in settings:
            action.default = settings[action.dest]
            action.required = False


def _plain(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    return value


def serialize_args(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> dict[str, Any]:
    return {
        action.dest: _plain(getattr(args, action.dest, None))
        for action in _option_actions(parser)
    }


def find_subparser(
    parser: argparse.ArgumentParser,
    command: str | None,
) -> argparse.ArgumentParser | None:
    if not command:
        return None
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            return action.choices.get(command)
    return None
