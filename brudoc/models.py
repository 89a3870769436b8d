"""Core data models shared across bruno-doc components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class SourceFile:
    """A candidate .bru file discovered under the source root."""

    path: Path

    @property
    def basename(self) -> str:
        return self.path.name


@dataclass
class BuildOutcome:
    """Result of a single documentation build."""

    destination: Path
    files: List[SourceFile] = field(default_factory=list)
    contributed: List[SourceFile] = field(default_factory=list)
    content: str = ""
    dry_run: bool = False

    @property
    def written(self) -> bool:
        return bool(self.files) and not self.dry_run
