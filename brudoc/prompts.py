"""Interactive questions asked by the build and guided commands."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .constants import DEFAULT_DESTINATION, DEFAULT_SOURCE
from .logging import VERBOSE, get_logger

_DESTINATION_ANSWER = re.compile(r"^(?:[\w\-\s./]+/)*[\w\-\s.]+\.md$")


class Prompter(ABC):
    """Contract for the questions bruno-doc may ask during a run."""

    @abstractmethod
    def confirm_overwrite(self) -> bool:
        """Return True when an existing documentation file may be replaced."""

    @abstractmethod
    def confirm_build(self) -> bool:
        """Return True when a tested build should now be written."""

    @abstractmethod
    def confirm_save_config(self) -> bool:
        """Return True when the current options should be saved."""

    @abstractmethod
    def ask_source(self, default: str = DEFAULT_SOURCE) -> str:
        """Return the collection directory to read."""

    @abstractmethod
    def ask_destination(self, default: str = DEFAULT_DESTINATION) -> str:
        """Return the documentation file to write."""

    @abstractmethod
    def ask_test_mode(self) -> bool:
        """Return True when the run should only test the process."""


class ConsolePrompter(Prompter):
    """Asks questions on the terminal using rich prompts."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.logger = get_logger("prompts")

    def _confirm(self, message: str, label: str, *, default: bool = True) -> bool:
        answer = bool(Confirm.ask(message, default=default, console=self.console))
        self.logger.log(VERBOSE, "User provided %s: %s", label, answer)
        return answer

    def confirm_overwrite(self) -> bool:
        return self._confirm(
            "A documentation file already exists.  Do you want to overwrite it "
            "and create a new set of documentation?",
            "documentation overwrite confirmation",
        )

    def confirm_build(self) -> bool:
        return self._confirm(
            "Test completed.  Do you want to build the documentation?",
            "build confirmation",
        )

    def confirm_save_config(self) -> bool:
        return self._confirm(
            "Do you want to save these options to the configuration file for future use?  "
            "This will overwrite any existing configuration options.",
            "save config",
        )

    def ask_test_mode(self) -> bool:
        return self._confirm(
            "Do you want to just test the process without writing documentation?",
            "test mode",
            default=False,
        )

    def ask_source(self, default: str = DEFAULT_SOURCE) -> str:
        while True:
            answer = Prompt.ask(
                "Where is the collection of Bruno files?", default=default, console=self.console
            ).strip()
            if answer and Path(answer).expanduser().is_dir():
                break
            self.console.print("[red]Invalid file path. Please enter a valid file path.[/red]")
        self.logger.log(VERBOSE, "User provided source: %s", answer)
        return answer

    def ask_destination(self, default: str = DEFAULT_DESTINATION) -> str:
        while True:
            answer = Prompt.ask(
                "Where should the documentation file be saved?",
                default=default,
                console=self.console,
            ).strip()
            if _DESTINATION_ANSWER.match(answer):
                break
            self.console.print(
                "[red]Invalid file path. Please enter a valid file name ending in .md[/red]"
            )
        self.logger.log(VERBOSE, "User provided destination: %s", answer)
        return answer


__all__ = ["ConsolePrompter", "Prompter"]
