# src/framegif/pipeline/palette.py
"""
Palette encoding: RGB frames -> indexed ("P") frames, one task per run.
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence, Tuple

from PIL import Image

from framegif.errors import EncodeError
from framegif.types import DedupRun, PalettedRun

MAX_COLORS = 256

__all__ = ["MAX_COLORS", "quantize_frame", "encode_runs"]


def quantize_frame(image: Image.Image) -> Image.Image:
    """
    Median-cut ``image`` down to at most MAX_COLORS colours, no dithering.

    Alpha is dropped: the frame is flattened to RGB first.
    """
    rgb = image.convert("RGB")
    out = rgb.quantize(
        colors=MAX_COLORS,
        method=Image.Quantize.MEDIANCUT,
        dither=Image.Dither.NONE,
    )
    if out.mode != "P":
        raise ValueError(f"quantization produced mode {out.mode!r}, expected 'P'")
    return out


def encode_runs(
    runs: Sequence[DedupRun],
    *,
    max_workers: Optional[int] = None,
) -> List[PalettedRun]:
    """
    Quantize every run's representative concurrently.

    Results land in a slot per run index, so the output order is the input
    order no matter which task finishes first. Every task runs to completion;
    failures are collected and raised together.

    Raises
    ------
    EncodeError
        If one or more frames failed to quantize.
    """
    n = len(runs)
    if n == 0:
        return []

    slots: List[Optional[PalettedRun]] = [None] * n
    failures: List[Tuple[int, BaseException]] = []
    lock = threading.Lock()

    def _encode_one(idx: int, run: DedupRun) -> None:
        paletted = PalettedRun(image=quantize_frame(run.frame.image), count=run.count)
        with lock:
            slots[idx] = paletted

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {
            pool.submit(_encode_one, idx, run): idx for idx, run in enumerate(runs)
        }
        for fut in as_completed(futures):
            exc = fut.exception()
            if exc is not None:
                failures.append((futures[fut], exc))

    if failures:
        raise EncodeError(failures)

    return [slot for slot in slots if slot is not None]
