# src/framegif/pipeline/dedup.py
"""
Collapse consecutive look-alike frames into runs.

Each run keeps its first frame as representative. Every following frame is
compared against that representative (not against the previous duplicate),
so slow drift across many frames eventually starts a new run.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from framegif.similarity import (
    DEFAULT_THRESHOLDS,
    IconOracle,
    SimilarityOracle,
    Thresholds,
    is_similar,
)
from framegif.types import DedupRun, Frame

__all__ = ["iter_runs", "deduplicate"]


def iter_runs(
    frames: Iterable[Frame],
    *,
    oracle: Optional[SimilarityOracle] = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Iterator[DedupRun]:
    """
    Yield one :class:`DedupRun` per maximal group of similar frames.

    Parameters
    ----------
    frames : iterable of Frame
        Consumed once, in order. Duplicates are dropped as soon as they have
        been counted.
    oracle : SimilarityOracle, optional
        Defaults to :class:`IconOracle`.
    thresholds : Thresholds
        Passed to :func:`framegif.similarity.is_similar`.

    Yields
    ------
    DedupRun
        In first-occurrence order. Nothing is yielded for empty input.
    """
    if oracle is None:
        oracle = IconOracle()

    rep: Optional[Frame] = None
    rep_summary = None
    count = 0

    for frame in frames:
        summary = oracle.summarize(frame.image)
        if rep is None:
            rep, rep_summary, count = frame, summary, 1
            continue

        if is_similar(oracle, rep_summary, summary, thresholds):
            count += 1
            continue

        yield DedupRun(frame=rep, count=count)
        rep, rep_summary, count = frame, summary, 1

    if rep is not None:
        yield DedupRun(frame=rep, count=count)


def deduplicate(
    frames: Iterable[Frame],
    *,
    oracle: Optional[SimilarityOracle] = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> List[DedupRun]:
    return list(iter_runs(frames, oracle=oracle, thresholds=thresholds))
