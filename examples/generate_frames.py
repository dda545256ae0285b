"""
generate_frames.py

Writes a small synthetic frame folder for trying framegif out.

The sequence has held frames (identical images in a row), a frame with a
speck of noise that should merge into its run, and a moving bar, so the
resulting GIF shows both run-length delays and ordinary frames:

 frame_000..002 : dark background, bar at x=0      (one run of 3)
 frame_003      : same + a single noisy pixel      (merges into that run)
 frame_004..007 : bar moving right, one step each  (four runs of 1)
 frame_008..010 : bar parked at the right edge     (one run of 3)

Usage
-----
$ python examples/generate_frames.py samples/frames
$ framegif build samples/frames -o samples/demo.gif --fps 10
"""

from pathlib import Path
import sys

import numpy as np
from PIL import Image

W, H = 96, 64
BAR_W = 16


def bar_frame(x: int, *, speck: bool = False) -> np.ndarray:
    img = np.zeros((H, W, 3), dtype=np.uint8)
    img[...] = (24, 28, 40)
    # vertical gradient so the frames are not flat colour
    img[..., 2] = np.linspace(40, 120, H, dtype=np.uint8)[:, None]
    img[:, x : x + BAR_W] = (240, 90, 30)
    if speck:
        img[H // 2, W - 1] = (60, 60, 60)
    return img


def frame_sequence() -> list:
    frames = [bar_frame(0) for _ in range(3)]
    frames.append(bar_frame(0, speck=True))
    step = (W - BAR_W) // 5
    frames += [bar_frame(step * (i + 1)) for i in range(4)]
    frames += [bar_frame(W - BAR_W) for _ in range(3)]
    return frames


def main(out_folder: str = "samples/frames") -> None:
    out = Path(out_folder)
    out.mkdir(parents=True, exist_ok=True)
    for idx, arr in enumerate(frame_sequence()):
        path = out / f"frame_{idx:03d}.png"
        Image.fromarray(arr).save(path)
        print(f"  wrote {path}")
    print(f"[frames] {idx + 1} frames in {out}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "samples/frames")
