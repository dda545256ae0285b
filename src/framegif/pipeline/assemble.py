# src/framegif/pipeline/assemble.py
"""
Frame timing.

GIF delays are centiseconds. One input frame lasts ``100 // fps``
centiseconds; a stored frame standing for ``count`` identical inputs is
shown ``count`` times as long.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from framegif.types import AnimatedGif, PalettedRun

DEFAULT_FPS = 30

__all__ = ["DEFAULT_FPS", "delay_unit", "frame_delays", "assemble"]


def delay_unit(fps: Optional[int] = None) -> int:
    """Centiseconds per input frame; ``None`` and 0 mean DEFAULT_FPS."""
    if not fps:
        fps = DEFAULT_FPS
    if fps < 0:
        raise ValueError(f"fps must be >= 0, got {fps!r}")
    return 100 // int(fps)


def frame_delays(runs: Sequence[PalettedRun], fps: Optional[int] = None) -> List[int]:
    unit = delay_unit(fps)
    return [unit * run.count for run in runs]


def assemble(
    runs: Sequence[PalettedRun],
    fps: Optional[int] = None,
    *,
    loop: int = 0,
) -> AnimatedGif:
    return AnimatedGif(runs=list(runs), delay_unit=delay_unit(fps), loop=loop)
