# src/framegif/pipeline/build.py
"""
End-to-end build: frame files -> runs -> paletted runs -> GIF file.

Stages run in order; only palette encoding fans out. Nothing is written to
the destination until every frame has been decoded, quantized and the
whole GIF serialized.
"""
from __future__ import annotations

import time
from pathlib import Path
from typing import Iterable, Optional, Union

from framegif.errors import FramegifError, SourceError
from framegif.io.frames import iter_frames, list_frame_paths
from framegif.io.gif import write_gif
from framegif.similarity import DEFAULT_THRESHOLDS, SimilarityOracle, Thresholds
from framegif.types import AnimatedGif, BuildResult

from .assemble import assemble
from .dedup import deduplicate
from .palette import encode_runs

PathLike = Union[str, Path]

DEFAULT_OUTPUT = "out.gif"

__all__ = ["DEFAULT_OUTPUT", "build_gif", "generate"]


def build_gif(
    paths: Iterable[PathLike],
    output: Optional[PathLike] = None,
    fps: Optional[int] = None,
    *,
    oracle: Optional[SimilarityOracle] = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
    max_workers: Optional[int] = None,
    loop: int = 0,
    progress: bool = False,
) -> AnimatedGif:
    """
    Build an animated GIF from ordered frame files.

    Parameters
    ----------
    paths : iterable of str or Path
        Frame files, already in display order. Not re-sorted.
    output : str or Path, optional
        Destination; empty or None means ``out.gif``.
    fps : int, optional
        Input frame rate; None or 0 means 30.
    oracle, thresholds
        Frame similarity test used for deduplication.
    max_workers : int, optional
        Thread count for palette encoding (executor default if None).
    loop : int
        GIF loop count, 0 = forever.
    progress : bool
        Show a tqdm bar while decoding.

    Returns
    -------
    AnimatedGif
        What was written.

    Raises
    ------
    SourceError, EncodeError, AssemblyError
    """
    path_list = [Path(p) for p in paths]
    if not path_list:
        raise SourceError("no input frames")

    out = Path(output) if output else Path(DEFAULT_OUTPUT)

    frames = iter_frames(path_list, progress=progress)
    runs = deduplicate(frames, oracle=oracle, thresholds=thresholds)
    paletted = encode_runs(runs, max_workers=max_workers)
    animated = assemble(paletted, fps, loop=loop)
    write_gif(animated, out)
    return animated


def generate(
    folder: PathLike,
    output: Optional[PathLike] = None,
    fps: Optional[int] = None,
    **kwargs,
) -> BuildResult:
    """
    List ``folder``, build the GIF and report the outcome.

    Pipeline failures do not raise; they come back as a failed
    :class:`BuildResult` tagged with the error category.
    """
    out = Path(output) if output else Path(DEFAULT_OUTPUT)
    t0 = time.perf_counter()
    n_inputs = 0
    try:
        paths = list_frame_paths(folder)
        n_inputs = len(paths)
        animated = build_gif(paths, out, fps, **kwargs)
    except FramegifError as exc:
        return BuildResult(
            output=out,
            duration=time.perf_counter() - t0,
            n_inputs=n_inputs,
            error=exc,
            category=exc.category,
        )

    return BuildResult(
        output=out,
        duration=time.perf_counter() - t0,
        n_inputs=n_inputs,
        n_frames=animated.n_frames,
    )
