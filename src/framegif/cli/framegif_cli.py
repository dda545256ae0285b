from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from framegif import __version__
from framegif.cli.settings import (
    add_settings_args,
    strip_settings_args,
    detect_command,
    load_settings,
    select_settings,
    apply_settings_to_parser,
    serialize_args,
    save_settings,
    find_subparser,
)
from framegif.errors import FramegifError
from framegif.io.gif import read_gif_info
from framegif.pipeline import DEFAULT_FPS, DEFAULT_OUTPUT, generate


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _path(p: str | Path) -> Path:
    return Path(p).expanduser().resolve()


def _fps_arg(text: object) -> int:
    """Integer frame rate; blanks are ignored and an empty value means 30."""
    if isinstance(text, int):
        value = text
    else:
        cleaned = str(text).replace(" ", "")
        if cleaned == "":
            return DEFAULT_FPS
        try:
            value = int(cleaned)
        except ValueError:
            raise argparse.ArgumentTypeError(f"fps must be an integer, got {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"fps must be >= 0, got {value}")
    return value


def _jobs_arg(text: object) -> int:
    try:
        value = int(str(text))
    except ValueError:
        raise argparse.ArgumentTypeError(f"jobs must be an integer, got {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"jobs must be >= 1, got {value}")
    return value


# ---------------------------------------------------------------------------
# Subcommand implementations
# ---------------------------------------------------------------------------

def _cmd_build(args: argparse.Namespace) -> int:
    folder = _path(args.folder)
    out_path = _path(args.output or DEFAULT_OUTPUT)
    fps = args.fps or DEFAULT_FPS

    print(f"[config] folder={folder}")
    print(f"[config] output={out_path} fps={fps} jobs={args.jobs or 'auto'}")

    result = generate(
        folder,
        out_path,
        fps,
        max_workers=args.jobs,
        progress=args.progress,
    )
    if not result.ok:
        print(f"[error:{result.category}] {result.error}", file=sys.stderr)
        return 1

    print(
        f"[done] {result.output} ({result.n_inputs} input frames -> "
        f"{result.n_frames} stored frames, {result.duration:.2f}s)"
    )
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    gif_path = _path(args.gif_path)
    try:
        info = read_gif_info(gif_path)
    except FramegifError as exc:
        print(f"[error:{exc.category}] {exc}", file=sys.stderr)
        return 1

    w, h = info.size
    print(f"[gif] {gif_path}")
    print(f"  size: {w}x{h}")
    print(f"  frames: {info.n_frames}")
    print(f"  total: {info.total_delay / 100.0:.2f}s")
    for idx, delay in enumerate(info.delays):
        print(f"  frame {idx}: {delay} cs")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="framegif",
        description="Generate a GIF from a folder of png or jpg files.",
    )
    add_settings_args(parser)
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---- build ----
    p_build = subparsers.add_parser(
        "build",
        help="Build an animated GIF from the images in a folder.",
    )
    add_settings_args(p_build)
    p_build.add_argument(
        "folder",
        help="Folder with the input frames (.png / .jpg, ordered by name).",
    )
    p_build.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Output GIF path (default: {DEFAULT_OUTPUT}).",
    )
    p_build.add_argument(
        "--fps",
        type=_fps_arg,
        default=DEFAULT_FPS,
        help=f"Input frame rate; 0 or empty means {DEFAULT_FPS}.",
    )
    p_build.add_argument(
        "--jobs",
        type=_jobs_arg,
        default=None,
        help="Worker threads for palette encoding (default: automatic).",
    )
    p_build.add_argument(
        "--no-progress",
        dest="progress",
        action="store_false",
        help="Disable the decode progress bar.",
    )
    p_build.set_defaults(func=_cmd_build, progress=True)

    # ---- inspect ----
    p_inspect = subparsers.add_parser(
        "inspect",
        help="Print frame count and per-frame delays of a GIF.",
    )
    p_inspect.add_argument(
        "gif_path",
        help="GIF file to inspect.",
    )
    p_inspect.set_defaults(func=_cmd_inspect)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    raw_argv = list(argv) if argv is not None else sys.argv[1:]
    cleaned_argv, settings_path, save_path = strip_settings_args(raw_argv)
    command = detect_command(cleaned_argv)

    if settings_path:
        settings_data = load_settings(Path(settings_path))
        settings = select_settings(settings_data, command)
        target = find_subparser(parser, command) or parser
        apply_settings_to_parser(target, settings)

    args = parser.parse_args(cleaned_argv)

    if save_path:
        cmd = getattr(args, "command", command)
        target = find_subparser(parser, cmd) or parser
        save_settings(Path(save_path), serialize_args(args, target), command=cmd)

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
