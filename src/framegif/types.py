# src/framegif/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image

__all__ = [
    "Frame",
    "DedupRun",
    "PalettedRun",
    "AnimatedGif",
    "BuildResult",
]


@dataclass(frozen=True)
class Frame:
    """
    One decoded input image.

    Attributes
    ----------
    path : Path
        Source file the frame was decoded from.
    image : PIL.Image.Image
        Fully loaded raster (no open file handle behind it).
    """

    path: Path
    image: Image.Image

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    @property
    def mode(self) -> str:
        return self.image.mode


@dataclass(frozen=True)
class DedupRun:
    """A representative frame plus how many consecutive inputs it stands for."""

    frame: Frame
    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"run count must be >= 1, got {self.count!r}")


@dataclass(frozen=True)
class PalettedRun:
    """Indexed ("P" mode) raster carrying its run's repetition count."""

    image: Image.Image
    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"run count must be >= 1, got {self.count!r}")
        if self.image.mode != "P":
            raise ValueError(f"expected a 'P' mode image, got {self.image.mode!r}")


@dataclass
class AnimatedGif:
    """
    Ordered stored frames plus the delay unit (centiseconds per input frame).

    ``loop`` is the NETSCAPE loop count written into the container
    (0 = loop forever).
    """

    runs: List[PalettedRun]
    delay_unit: int
    loop: int = 0

    @property
    def n_frames(self) -> int:
        return len(self.runs)

    @property
    def delays(self) -> List[int]:
        # centiseconds per stored frame
        return [self.delay_unit * run.count for run in self.runs]


@dataclass
class BuildResult:
    output: Optional[Path] = None
    duration: float = 0.0
    n_inputs: int = 0
    n_frames: int = 0
    error: Optional[Exception] = field(default=None, repr=False)
    category: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
