"""Error taxonomy for icon builds.

Every failure aborts the whole build; nothing here is caught and recovered
inside the pipeline.
"""

from __future__ import annotations

from pathlib import Path


class IconBuildError(RuntimeError):
    """Base class for failures that abort an icon build."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DiscoveryError(IconBuildError):
    """Input directory is unreadable or enumeration failed."""


class DuplicateIconError(DiscoveryError):
    """Two discovered files map to the same component identifier."""


class ReadError(IconBuildError):
    """A discovered icon file could not be read."""


class OptimizeError(IconBuildError):
    """The markup optimizer rejected an icon or could not be run."""


class ParseError(IconBuildError):
    """Optimized markup is not well-formed."""


class FormatError(IconBuildError):
    """The source formatter rejected generated component code."""


class WriteError(IconBuildError):
    """An output file or directory could not be written."""


__all__ = [
    "DiscoveryError",
    "DuplicateIconError",
    "FormatError",
    "IconBuildError",
    "OptimizeError",
    "ParseError",
    "ReadError",
    "WriteError",
]
