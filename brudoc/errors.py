"""Exception hierarchy for bruno-doc."""

from __future__ import annotations

from pathlib import Path


class BrudocError(RuntimeError):
    """Base class for errors raised by bruno-doc."""


class BuildFailure(BrudocError):
    """Raised when a documentation build cannot complete."""


class SourcePathNotFound(BuildFailure):
    """Raised when the source directory is missing or unreadable."""

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        self.path = Path(path)
        message = f"Source path not found: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class OverwriteDeclined(BuildFailure):
    """Raised when the user refuses to replace an existing destination."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Documentation file '{path}' already exists; not overwritten.")


class DestinationWriteFailure(BuildFailure):
    """Raised when the destination cannot be prepared or written."""

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to write documentation to '{path}': {error}")


class ExtractionError(BrudocError):
    """Raised when a .bru file cannot contribute documentation."""


class MissingMetadata(ExtractionError):
    """The file has neither a docs block nor a meta block."""


class MissingName(ExtractionError):
    """The meta block lacks a usable ``name:`` declaration."""


__all__ = [
    "BrudocError",
    "BuildFailure",
    "DestinationWriteFailure",
    "ExtractionError",
    "MissingMetadata",
    "MissingName",
    "OverwriteDeclined",
    "SourcePathNotFound",
]
