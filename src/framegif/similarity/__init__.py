"""
framegif.similarity
===================

Decides whether two consecutive frames look the same.

Submodules:
- framegif.similarity.icons  : icon summaries and the two metrics
- framegif.similarity.oracle : injectable oracle protocol and thresholds
"""

from .icons import (
    ICON_SIZE,
    Icon,
    make_icon,
    prop_metric,
    euc_metric,
)

from .oracle import (
    SimilarityOracle,
    IconOracle,
    Thresholds,
    DEFAULT_THRESHOLDS,
    is_similar,
)

__all__ = [
    # icons
    "ICON_SIZE",
    "Icon",
    "make_icon",
    "prop_metric",
    "euc_metric",
    # oracle
    "SimilarityOracle",
    "IconOracle",
    "Thresholds",
    "DEFAULT_THRESHOLDS",
    "is_similar",
]
