"""
framegif.pipeline
=================

Decode -> deduplicate -> palette-encode -> assemble -> write.

Submodules:
- framegif.pipeline.dedup    : run-length deduplication of look-alike frames
- framegif.pipeline.palette  : concurrent 256-colour quantization
- framegif.pipeline.assemble : frame delays and the AnimatedGif container
- framegif.pipeline.build    : end-to-end build and result reporting
"""

from .dedup import iter_runs, deduplicate
from .palette import MAX_COLORS, quantize_frame, encode_runs
from .assemble import DEFAULT_FPS, delay_unit, frame_delays, assemble
from .build import DEFAULT_OUTPUT, build_gif, generate

__all__ = [
    # dedup
    "iter_runs",
    "deduplicate",
    # palette
    "MAX_COLORS",
    "quantize_frame",
    "encode_runs",
    # assemble
    "DEFAULT_FPS",
    "delay_unit",
    "frame_delays",
    "assemble",
    # build
    "DEFAULT_OUTPUT",
    "build_gif",
    "generate",
]
