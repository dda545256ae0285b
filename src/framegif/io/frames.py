# src/framegif/io/frames.py
"""
Frame source and decoder.

Inputs are PNG or JPEG files. Decoding is strictly sequential and in the
order the paths are given; neighbouring frames are compared downstream, so
nothing here reorders or parallelizes.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Union

from PIL import Image
from tqdm import tqdm

from framegif.errors import SourceError
from framegif.types import Frame

PathLike = Union[str, Path]

SUPPORTED_EXTS = (".png", ".jpg")
SUPPORTED_FORMATS = ("PNG", "JPEG")

__all__ = [
    "SUPPORTED_EXTS",
    "SUPPORTED_FORMATS",
    "list_frame_paths",
    "read_frame",
    "iter_frames",
]


def _path(p: PathLike) -> Path:
    return Path(p).expanduser()


def list_frame_paths(folder: PathLike) -> List[Path]:
    """
    List the frame files directly inside ``folder``.

    Only regular files with a supported extension are kept; the result is
    sorted lexicographically so frame order follows file naming
    (``frame_0001.png``, ``frame_0002.png``, ...).
    """
    root = _path(folder)
    if not root.is_dir():
        raise SourceError("not a folder", root)
    try:
        entries = list(root.iterdir())
    except OSError as exc:
        raise SourceError(f"failed to list folder: {exc}", root) from exc

    files = [p for p in entries if p.is_file() and p.suffix.lower() in SUPPORTED_EXTS]
    return sorted(files, key=lambda p: str(p))


def read_frame(path: PathLike) -> Frame:
    """
    Decode one PNG/JPEG file into a :class:`Frame`.

    The format is detected from the file content. Pixel data is fully loaded
    before the file handle is released, so the returned frame holds no open
    file.

    Raises
    ------
    SourceError
        If the file cannot be opened or is not a decodable PNG/JPEG.
    """
    p = _path(path)
    try:
        with Image.open(p, formats=SUPPORTED_FORMATS) as im:
            im.load()
            img = im.copy()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError, PermissionError) as exc:
        raise SourceError(f"failed to open file: {exc.strerror or exc}", p) from exc
    except (OSError, EOFError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        # UnidentifiedImageError and truncated-data errors are OSErrors
        raise SourceError(f"failed to decode image: {exc}", p) from exc
    return Frame(path=p, image=img)


def iter_frames(
    paths: Iterable[PathLike],
    *,
    progress: bool = False,
) -> Iterator[Frame]:
    """
    Lazily decode ``paths`` in order.

    Decoding stops at the first failure; the :class:`SourceError` propagates
    to the caller and no later path is opened.
    """
    path_list = list(paths)
    it: Iterable[PathLike] = path_list
    if progress:
        it = tqdm(path_list, total=len(path_list), desc="decode", unit="frame")
    for p in it:
        yield read_frame(p)
