"""
framegif.io
===========

File IO for the pipeline.

This module exposes:
- Frame listing and PNG/JPEG decoding
- Animated GIF encoding, writing and inspection

Submodules:
- framegif.io.frames
- framegif.io.gif
"""

from .frames import (
    SUPPORTED_EXTS,
    SUPPORTED_FORMATS,
    list_frame_paths,
    read_frame,
    iter_frames,
)

from .gif import (
    MAX_DELAY,
    GifInfo,
    encode_gif,
    write_gif,
    read_gif_info,
)

__all__ = [
    # frames
    "SUPPORTED_EXTS",
    "SUPPORTED_FORMATS",
    "list_frame_paths",
    "read_frame",
    "iter_frames",
    # gif
    "MAX_DELAY",
    "GifInfo",
    "encode_gif",
    "write_gif",
    "read_gif_info",
]
