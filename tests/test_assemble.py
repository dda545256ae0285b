"""
Tests for framegif.pipeline.assemble (delay arithmetic).
"""

import pytest
from PIL import Image

from framegif.pipeline.assemble import DEFAULT_FPS, assemble, delay_unit, frame_delays
from framegif.types import PalettedRun


def _runs(*counts):
    return [PalettedRun(image=Image.new("P", (2, 2), 0), count=c) for c in counts]


@pytest.mark.parametrize(
    "fps, unit",
    [(25, 4), (30, 3), (10, 10), (7, 14), (50, 2), (100, 1), (1, 100)],
)
def test_delay_unit_is_floor_of_100_over_fps(fps, unit):
    assert delay_unit(fps) == unit


def test_zero_or_missing_fps_means_default():
    assert DEFAULT_FPS == 30
    assert delay_unit(0) == delay_unit(None) == delay_unit(30) == 3


def test_negative_fps_rejected():
    with pytest.raises(ValueError):
        delay_unit(-5)


def test_frame_delays_scale_with_run_count():
    # [A, A, B] at 25 fps -> A shown 8 cs, B shown 4 cs
    assert frame_delays(_runs(2, 1), 25) == [8, 4]
    assert frame_delays(_runs(2, 1), 0) == [6, 3]
    assert frame_delays(_runs(5), 10) == [50]


def test_assemble_builds_container():
    runs = _runs(3, 1, 2)
    gif = assemble(runs, 20)
    assert gif.n_frames == 3
    assert gif.delay_unit == 5
    assert gif.delays == [15, 5, 10]
    assert gif.loop == 0
    assert gif.runs == runs
