"""Pipeline that assembles the documentation file from a collection."""

from __future__ import annotations

import io
from pathlib import Path
from typing import List, Optional, TextIO

from .config import BuildConfig
from .errors import DestinationWriteFailure, OverwriteDeclined
from .extractor import DocExtractor
from .logging import VERBOSE, get_logger
from .models import BuildOutcome, SourceFile
from .prompts import ConsolePrompter, Prompter
from .scanner import BruScanner


def _resolve(path: str | Path) -> Path:
    return Path.cwd() / Path(path).expanduser()


class Assembler:
    """Coordinates scanning, extraction and writing for one collection."""

    def __init__(
        self,
        scanner: BruScanner | None = None,
        extractor: DocExtractor | None = None,
        prompter: Prompter | None = None,
    ) -> None:
        self.scanner = scanner or BruScanner()
        self._extractor = extractor
        self.prompter = prompter or ConsolePrompter()
        self.logger = get_logger("assembler")

    def assemble(self, config: BuildConfig) -> BuildOutcome:
        """Build the documentation described by ``config``.

        In test mode the document is rendered in memory only and the
        destination is never touched. Raises ``SourcePathNotFound``,
        ``OverwriteDeclined`` or ``DestinationWriteFailure``.
        """
        source = _resolve(config.source)
        destination = _resolve(config.destination)
        outcome = BuildOutcome(destination=destination, dry_run=config.test)
        self.logger.log(VERBOSE, "Source path is '%s'", source)
        self.logger.log(VERBOSE, "Destination path is '%s'", destination)

        outcome.files = self.scanner.scan(source)
        if not outcome.files:
            self.logger.warning("No .bru files found in '%s'", source)
            return outcome

        extractor = self._extractor or DocExtractor(silent=config.silent)

        buffer = io.StringIO()
        outcome.contributed = self._write_document(buffer, config, outcome.files, extractor)
        outcome.content = buffer.getvalue()

        if config.test:
            self.logger.info(
                "Test complete; %d of %d files would be documented.",
                len(outcome.contributed),
                len(outcome.files),
            )
            return outcome

        self._prepare_destination(destination, config)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with destination.open("w", encoding="utf-8") as handle:
                handle.write(outcome.content)
        except OSError as exc:
            raise DestinationWriteFailure(destination, exc) from exc

        self.logger.info("Documentation written to '%s'", destination)
        return outcome

    def _prepare_destination(self, destination: Path, config: BuildConfig) -> None:
        if not destination.exists():
            return
        if not (config.force or config.silent) and not self.prompter.confirm_overwrite():
            self.logger.info("Existing documentation kept; build cancelled.")
            raise OverwriteDeclined(destination)
        self.logger.log(VERBOSE, "Removing existing documentation file '%s'", destination)
        try:
            destination.unlink()
        except OSError as exc:
            raise DestinationWriteFailure(destination, exc) from exc

    def _write_document(
        self,
        handle: TextIO,
        config: BuildConfig,
        files: List[SourceFile],
        extractor: DocExtractor,
    ) -> List[SourceFile]:
        self._write_fragment(handle, "header", config.header)

        contributed: List[SourceFile] = []
        excludes = set(config.excludes)
        for source_file in files:
            if source_file.basename in excludes:
                self.logger.log(VERBOSE, "'%s' is in the exclude list; skipping", source_file.basename)
                continue
            self.logger.log(VERBOSE, "Processing '%s'", source_file.path)
            documentation = extractor.extract(source_file)
            if documentation:
                handle.write(documentation)
                contributed.append(source_file)

        self._write_fragment(handle, "tail", config.tail)
        return contributed

    def _write_fragment(self, handle: TextIO, label: str, path: Optional[str]) -> None:
        if not path:
            return
        fragment = _resolve(path)
        if not fragment.is_file():
            self.logger.warning("%s file '%s' does not exist; skipping", label.capitalize(), fragment)
            return
        self.logger.log(VERBOSE, "Processing %s file: %s", label, path)
        try:
            text = fragment.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.warning("Unable to read %s file '%s': %s; skipping", label, fragment, exc)
            return
        handle.write(text)


__all__ = ["Assembler"]
