# tests/conftest.py
from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import pytest
from PIL import Image

# Root of repo: tests/.. = project root
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from framegif.types import Frame  # noqa: E402

EXAMPLE_SCRIPT = PROJECT_ROOT / "examples" / "generate_frames.py"

RED = (220, 30, 30)
GREEN = (30, 200, 60)
BLUE = (30, 40, 220)
WHITE = (250, 250, 250)
BLACK = (5, 5, 5)

Color = Tuple[int, int, int]


def solid(color: Color, size: Tuple[int, int] = (32, 24)) -> Image.Image:
    return Image.new("RGB", size, color)


def solid_frame(color: Color, size: Tuple[int, int] = (32, 24), name: str = "mem.png") -> Frame:
    return Frame(path=Path(name), image=solid(color, size))


@pytest.fixture
def write_frames(tmp_path: Path) -> Callable[..., List[Path]]:
    """
    Write solid-colour frames into ``tmp_path/frames`` as frame_000.png, ...

    Returns the written paths in order.
    """

    def _write(
        colors: Iterable[Color],
        *,
        folder: str = "frames",
        size: Tuple[int, int] = (32, 24),
        ext: str = ".png",
    ) -> List[Path]:
        out = tmp_path / folder
        out.mkdir(parents=True, exist_ok=True)
        paths = []
        for idx, color in enumerate(colors):
            p = out / f"frame_{idx:03d}{ext}"
            solid(color, size).save(p)
            paths.append(p)
        return paths

    return _write


def _load_example_script():
    spec = importlib.util.spec_from_file_location("generate_frames", EXAMPLE_SCRIPT)
    if spec is None or spec.loader is None:
        pytest.skip(f"Could not load {EXAMPLE_SCRIPT}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def demo_frames_dir(tmp_path: Path) -> Path:
    """Synthetic sequence from examples/generate_frames.py."""
    out = tmp_path / "demo"
    _load_example_script().main(out_folder=str(out))
    return out
