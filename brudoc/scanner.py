"""Collection scanning for .bru request files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List

from .constants import BRU_EXTENSION
from .errors import SourcePathNotFound
from .logging import VERBOSE, get_logger
from .models import SourceFile


def _iter_entries(folder: Path) -> Iterator[Path]:
    # os.scandir keeps the filesystem's native listing order.
    with os.scandir(folder) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                yield from _iter_entries(Path(entry.path))
            else:
                # The root is resolved; file symlinks keep their own name.
                yield Path(entry.path)


class BruScanner:
    """Walks a collection directory and returns its .bru files."""

    def __init__(self, extension: str = BRU_EXTENSION) -> None:
        self.extension = extension
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path) -> List[SourceFile]:
        """Return every file under ``root`` ending in the configured extension."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise SourcePathNotFound(root)
        if not root_path.is_dir():
            raise SourcePathNotFound(root, "not a directory")

        try:
            entries = list(_iter_entries(root_path))
        except OSError as exc:
            raise SourcePathNotFound(root, exc.strerror or str(exc)) from exc
        self.logger.debug("Found %d entries under %s", len(entries), root_path)

        files = [SourceFile(path) for path in entries if str(path).endswith(self.extension)]
        self.logger.log(VERBOSE, "Found %d %s files in '%s'", len(files), self.extension, root_path)
        return files
