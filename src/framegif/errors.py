# src/framegif/errors.py
"""
Error taxonomy for the frame -> GIF pipeline.

Every failure the pipeline can surface is one of three categories:

- SourceError   : an input frame could not be opened or decoded
- EncodeError   : at least one frame failed palette quantization
- AssemblyError : the GIF could not be serialized or written

All of them are fatal for a single build. The ``category`` tag is what the
CLI and :class:`framegif.types.BuildResult` report.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

PathLike = Union[str, Path]

__all__ = [
    "FramegifError",
    "SourceError",
    "EncodeError",
    "AssemblyError",
]


class FramegifError(RuntimeError):
    """Base class for all pipeline failures."""

    category = "error"


class SourceError(FramegifError):
    category = "source"

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message} ({self.path})"
        super().__init__(message)


class EncodeError(FramegifError):
    """Raised once, after every quantization task has finished."""

    category = "encode"

    def __init__(self, failures: List[Tuple[int, BaseException]]) -> None:
        self.failures = sorted(failures, key=lambda item: item[0])
        if self.failures:
            idx, exc = self.failures[0]
            detail = f"first failure at frame {idx}: {exc}"
        else:
            detail = "no failures recorded"
        super().__init__(
            f"palette quantization failed for {len(self.failures)} frame(s); {detail}"
        )


class AssemblyError(FramegifError):
    category = "assemble"

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message} ({self.path})"
        super().__init__(message)
