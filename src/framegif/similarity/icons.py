# src/framegif/similarity/icons.py
"""
Icons: compact visual summaries of a frame.

An icon is the frame box-averaged down to ICON_SIZE x ICON_SIZE pixels and
expressed in YCbCr, plus the size of the source image. Two metrics are
defined on icons:

- prop_metric : how much the aspect proportions of the sources differ
- euc_metric  : per-channel (Y, Cb, Cr) squared Euclidean distance
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image

ICON_SIZE = 11

__all__ = [
    "ICON_SIZE",
    "Icon",
    "make_icon",
    "prop_metric",
    "euc_metric",
]


@dataclass(frozen=True)
class Icon:
    """
    Attributes
    ----------
    pixels : ndarray, shape (3, ICON_SIZE, ICON_SIZE), float64
        Y, Cb, Cr planes in [0, 255].
    image_size : (width, height)
        Size of the image the icon was made from.
    """

    pixels: np.ndarray
    image_size: Tuple[int, int]


def _rgb_to_ycbcr(rgb: np.ndarray) -> np.ndarray:
    """
    RGB in [0,255] -> YCbCr (BT.601) in [0,255], chroma centred on 128.
    Returns channel-first (3,H,W) float64.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    Y = 0.299 * r + 0.587 * g + 0.114 * b
    Cb = 0.564 * (b - Y) + 128.0
    Cr = 0.713 * (r - Y) + 128.0

    return np.clip(np.stack([Y, Cb, Cr], axis=0), 0.0, 255.0)


def make_icon(image: Image.Image) -> Icon:
    """Summarize ``image`` as an :class:`Icon`."""
    rgb = image.convert("RGB")
    small = rgb.resize((ICON_SIZE, ICON_SIZE), resample=Image.Resampling.BOX)
    pixels = _rgb_to_ycbcr(np.asarray(small))
    return Icon(pixels=pixels, image_size=(int(image.width), int(image.height)))


def prop_metric(a: Icon, b: Icon) -> float:
    """
    Difference in aspect proportions of the two source images.

    The narrower side of each image is scaled to 1 and the longer sides are
    compared relative to the larger of the two. 0 means identical
    proportions.
    """
    xa, ya = (float(v) for v in a.image_size)
    xb, yb = (float(v) for v in b.image_size)

    if xa <= ya:
        la = ya / xa
        lb = yb / xb
    else:
        la = xa / ya
        lb = xb / yb

    hi = max(la, lb)
    if hi == 0.0:
        return 0.0
    return abs(la - lb) / hi


def euc_metric(a: Icon, b: Icon) -> Tuple[float, float, float]:
    """Sum of squared pixel differences per channel: (Y, Cb, Cr)."""
    if a.pixels.shape != b.pixels.shape:
        raise ValueError(
            f"icon shapes differ: {a.pixels.shape} vs {b.pixels.shape}"
        )
    diff = a.pixels - b.pixels
    sq = np.sum(diff * diff, axis=(1, 2))
    return float(sq[0]), float(sq[1]), float(sq[2])
