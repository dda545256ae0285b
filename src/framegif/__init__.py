"""
framegif
Folder of still frames -> run-length timed animated GIF.
"""

# Robust version detection that works even when not installed
try:
    from importlib import metadata as _metadata  # 3.8+
except Exception:  # environment quirks
    _metadata = None  # type: ignore

try:
    __version__ = _metadata.version("framegif") if _metadata else "0.0.0.dev0"
except Exception:
    # Not installed (dev mode) or no metadata available
    __version__ = "0.0.0.dev0"

from .errors import FramegifError, SourceError, EncodeError, AssemblyError  # noqa: E402
from .pipeline import build_gif, generate  # noqa: E402
from . import io, similarity, pipeline  # noqa: E402

__all__ = [
    "io",
    "similarity",
    "pipeline",
    "build_gif",
    "generate",
    "FramegifError",
    "SourceError",
    "EncodeError",
    "AssemblyError",
    "__version__",
]
