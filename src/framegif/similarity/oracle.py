# src/framegif/similarity/oracle.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Tuple

from PIL import Image

from .icons import Icon, make_icon, prop_metric, euc_metric

__all__ = [
    "SimilarityOracle",
    "IconOracle",
    "Thresholds",
    "DEFAULT_THRESHOLDS",
    "is_similar",
]


class SimilarityOracle(Protocol):
    """
    Anything that can summarize frames and compare two summaries.

    ``summarize`` is called once per frame; the two compare methods only
    ever see values it returned.
    """

    def summarize(self, image: Image.Image) -> Any:
        ...

    def compare_proportion(self, a: Any, b: Any) -> float:
        ...

    def compare_distance(self, a: Any, b: Any) -> Tuple[float, float, float]:
        ...


class IconOracle:
    """Default oracle built on :mod:`framegif.similarity.icons`."""

    def summarize(self, image: Image.Image) -> Icon:
        return make_icon(image)

    def compare_proportion(self, a: Icon, b: Icon) -> float:
        return prop_metric(a, b)

    def compare_distance(self, a: Icon, b: Icon) -> Tuple[float, float, float]:
        return euc_metric(a, b)


@dataclass(frozen=True)
class Thresholds:
    """
    Cut-offs for :func:`is_similar`.

    proportion : max aspect-proportion difference
    luma       : max Y distance
    chroma     : max Cb and Cr distance (each)
    """

    proportion: float = 0.001
    luma: float = 100.0
    chroma: float = 200.0


DEFAULT_THRESHOLDS = Thresholds()


def is_similar(
    oracle: SimilarityOracle,
    a: Any,
    b: Any,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> bool:
    """
    Two-stage test on two summaries.

    Proportions are checked first; the colour distance is only computed
    when the proportions match.
    """
    if oracle.compare_proportion(a, b) > thresholds.proportion:
        return False

    d_y, d_cb, d_cr = oracle.compare_distance(a, b)
    if d_y > thresholds.luma:
        return False
    if d_cb > thresholds.chroma or d_cr > thresholds.chroma:
        return False
    return True
