# src/framegif/io/gif.py
"""
Animated GIF serialization and inspection.

Writing goes through Pillow's per-frame GIF helpers (``getheader`` /
``getdata``) so that every run becomes exactly one stored frame with the
local colour table it was quantized with. Pillow's ``save_all`` writer folds
pixel-identical neighbours together, which would break that count.
Reading back (``read_gif_info``) uses imageio's v3 API.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import List, Optional, Tuple, Union

import imageio.v3 as iio
from PIL import GifImagePlugin

from framegif.errors import AssemblyError, SourceError
from framegif.types import AnimatedGif

PathLike = Union[str, Path]

# delay and loop count are unsigned 16-bit fields in the container
MAX_DELAY = 0xFFFF
MAX_LOOP = 0xFFFF

__all__ = [
    "MAX_DELAY",
    "GifInfo",
    "encode_gif",
    "write_gif",
    "read_gif_info",
]


@dataclass(frozen=True)
class GifInfo:
    n_frames: int
    size: Tuple[int, int]
    delays: List[int]  # centiseconds per stored frame

    @property
    def total_delay(self) -> int:
        return sum(self.delays)


def _check_frames(animated: AnimatedGif) -> None:
    if not 0 <= int(animated.loop) <= MAX_LOOP:
        raise AssemblyError(f"loop count {animated.loop} is outside 0..{MAX_LOOP}")

    width, height = animated.runs[0].image.size
    for idx, (run, delay) in enumerate(zip(animated.runs, animated.delays)):
        w, h = run.image.size
        if (w, h) != (width, height):
            raise AssemblyError(
                f"frame {idx} is {w}x{h}, but the animation canvas is {width}x{height}"
            )
        if delay > MAX_DELAY:
            raise AssemblyError(
                f"frame {idx} holds for {delay} cs, more than the {MAX_DELAY} cs "
                "a GIF frame can store"
            )


def encode_gif(animated: AnimatedGif) -> bytes:
    """
    Serialize ``animated`` into GIF bytes.

    One stored frame is written per run, in order, each with its own colour
    table and a graphic control extension carrying its delay. Delays are in
    centiseconds; Pillow takes milliseconds and divides by 10 when writing,
    so ``delay * 10`` is exact.

    Raises
    ------
    AssemblyError
        If there are no frames, frame sizes differ, a delay does not fit the
        16-bit delay field, or Pillow fails to encode.
    """
    if not animated.runs:
        raise AssemblyError("no frames to write")
    _check_frames(animated)

    buf = BytesIO()
    try:
        # getheader/getdata modify the image they are given
        header, _ = GifImagePlugin.getheader(
            animated.runs[0].image.copy(),
            info={"loop": int(animated.loop), "optimize": False},
        )
        for block in header:
            buf.write(block)

        for run, delay in zip(animated.runs, animated.delays):
            blocks = GifImagePlugin.getdata(
                run.image.copy(),
                (0, 0),
                duration=delay * 10,
                include_color_table=True,
            )
            for block in blocks:
                buf.write(block)

        buf.write(b";")  # trailer
    except (OSError, ValueError, struct.error) as exc:
        raise AssemblyError(f"failed to encode GIF: {exc}") from exc
    return buf.getvalue()


def write_gif(animated: AnimatedGif, path: PathLike) -> Path:
    """
    Encode ``animated`` and write it to ``path`` (create or truncate).

    The whole file is serialized in memory before the destination is
    opened, so an encoding failure never touches the filesystem.
    """
    data = encode_gif(animated)

    out = Path(path).expanduser()
    try:
        with out.open("wb") as fh:
            fh.write(data)
    except OSError as exc:
        raise AssemblyError(f"failed to write GIF: {exc}", out) from exc
    return out


def read_gif_info(path: PathLike) -> GifInfo:
    """Frame count, canvas size and per-frame delays of an existing GIF."""
    p = Path(path).expanduser()
    size: Optional[Tuple[int, int]] = None
    delays: List[int] = []
    try:
        with iio.imopen(p, "r", extension=".gif", plugin="pillow") as file:
            # single pass: metadata(index=idx) reads the frame iter() is on
            for idx, frame in enumerate(file.iter()):
                if size is None:
                    h, w = frame.shape[:2]
                    size = (int(w), int(h))
                meta = file.metadata(index=idx)
                delays.append(int(round(float(meta.get("duration", 0)) / 10.0)))
    except Exception as exc:  # imageio reports unreadable files with assorted types
        raise SourceError(f"failed to read GIF: {exc}", p) from exc

    if size is None:
        raise SourceError("GIF has no frames", p)
    return GifInfo(n_frames=len(delays), size=size, delays=delays)
