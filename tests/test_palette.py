# tests/test_palette.py
from __future__ import annotations

import time
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from framegif.errors import EncodeError
from framegif.pipeline import palette
from framegif.pipeline.palette import MAX_COLORS, encode_runs, quantize_frame
from framegif.types import DedupRun, Frame, PalettedRun

from conftest import RED, solid_frame


def _noise_image(h: int = 48, w: int = 64, seed: int = 0) -> Image.Image:
    rng = np.random.default_rng(seed)
    arr = rng.integers(0, 256, size=(h, w, 3), dtype=np.uint8)
    return Image.fromarray(arr)


def _index_runs(n: int):
    # frame i is a 1x1 "L" image holding i; counts are i + 1
    return [
        DedupRun(frame=Frame(path=Path(f"f{i}.png"), image=Image.new("L", (1, 1), i)), count=i + 1)
        for i in range(n)
    ]


def test_quantize_many_colours_to_palette():
    img = _noise_image()
    assert len(img.getcolors(maxcolors=img.width * img.height)) > MAX_COLORS

    out = quantize_frame(img)
    assert out.mode == "P"
    assert out.size == img.size
    assert len(out.getpalette()) // 3 <= MAX_COLORS
    assert out.getcolors(maxcolors=MAX_COLORS) is not None


def test_quantize_drops_alpha_and_keeps_few_colours():
    rgba = Image.new("RGBA", (16, 16), (10, 20, 30, 100))
    out = quantize_frame(rgba)
    assert out.mode == "P"
    assert out.convert("RGB").getpixel((0, 0)) == (10, 20, 30)


def test_encode_runs_empty():
    assert encode_runs([]) == []


def test_encode_runs_keeps_counts_and_order():
    runs = [DedupRun(frame=solid_frame(RED), count=3), DedupRun(frame=solid_frame((0, 0, 255)), count=1)]
    out = encode_runs(runs)
    assert [r.count for r in out] == [3, 1]
    assert all(isinstance(r, PalettedRun) for r in out)
    assert out[0].image.convert("RGB").getpixel((0, 0)) == RED


def test_encode_runs_order_independent_of_completion(monkeypatch):
    n = 6
    finished = []

    def slow_first(image):
        idx = image.getpixel((0, 0))
        # earlier frames take longer, so they finish last
        time.sleep(0.02 * (n - idx))
        finished.append(idx)
        return Image.new("P", (1, 1), idx)

    monkeypatch.setattr(palette, "quantize_frame", slow_first)
    out = encode_runs(_index_runs(n), max_workers=n)

    assert finished != sorted(finished)
    assert [r.image.getpixel((0, 0)) for r in out] == list(range(n))
    assert [r.count for r in out] == [i + 1 for i in range(n)]


def test_encode_runs_aggregates_failures(monkeypatch):
    calls = []

    def flaky(image):
        idx = image.getpixel((0, 0))
        calls.append(idx)
        if idx in (1, 3):
            raise ValueError(f"boom {idx}")
        return Image.new("P", (1, 1), idx)

    monkeypatch.setattr(palette, "quantize_frame", flaky)
    with pytest.raises(EncodeError) as excinfo:
        encode_runs(_index_runs(5), max_workers=2)

    err = excinfo.value
    assert err.category == "encode"
    assert [idx for idx, _ in err.failures] == [1, 3]
    assert all(isinstance(exc, ValueError) for _, exc in err.failures)
    # every task still ran
    assert sorted(calls) == [0, 1, 2, 3, 4]
