"""Guided, question-driven documentation build."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from .assembler import Assembler
from .config import BuildConfig, save_config
from .logging import VERBOSE, get_logger
from .models import BuildOutcome
from .prompts import ConsolePrompter, Prompter


class GuidedBuild:
    """Walks the user through a build, optionally testing it first."""

    def __init__(
        self,
        prompter: Prompter | None = None,
        assembler: Assembler | None = None,
    ) -> None:
        self.prompter = prompter or ConsolePrompter()
        self.assembler = assembler or Assembler(prompter=self.prompter)
        self.logger = get_logger("wizard")

    def run(self, config: BuildConfig, config_file: str | Path | None = None) -> BuildOutcome | None:
        """Ask for the build options, run the build and offer to save them.

        Returns the outcome of the written build, or None when the user
        only tested and declined the real build.
        """
        source = self.prompter.ask_source(config.source)
        destination = self.prompter.ask_destination(config.destination)
        test = self.prompter.ask_test_mode()
        config = replace(config, source=source, destination=destination, test=False)

        outcome: BuildOutcome | None = None
        if test:
            self.logger.info("Testing build process...")
            self.assembler.assemble(replace(config, test=True))
            self.logger.log(VERBOSE, "File processing complete.")
            test = not self.prompter.confirm_build()

        if not test:
            self.logger.info("Building documentation...")
            outcome = self.assembler.assemble(config)

        if save_config(config, config_file, self.prompter):
            self.logger.info("Saved configuration options.")
        self.logger.info("Done")
        return outcome


__all__ = ["GuidedBuild"]
