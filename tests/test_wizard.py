"""Tests for brudoc.wizard."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from brudoc.config import BuildConfig
from brudoc.models import BuildOutcome
from brudoc.prompts import Prompter
from brudoc.wizard import GuidedBuild


class ScriptedPrompter(Prompter):
    """Answers every question from fixed values and records what was asked."""

    def __init__(
        self,
        *,
        source: str,
        destination: str,
        test_mode: bool = False,
        build: bool = True,
        save: bool = False,
    ) -> None:
        self.source = source
        self.destination = destination
        self.test_mode = test_mode
        self.build = build
        self.save = save
        self.asked: list[str] = []

    def confirm_overwrite(self) -> bool:
        self.asked.append("overwrite")
        return True

    def confirm_build(self) -> bool:
        self.asked.append("build")
        return self.build

    def confirm_save_config(self) -> bool:
        self.asked.append("save")
        return self.save

    def ask_source(self, default: str = "") -> str:
        self.asked.append("source")
        return self.source

    def ask_destination(self, default: str = "") -> str:
        self.asked.append("destination")
        return self.destination

    def ask_test_mode(self) -> bool:
        self.asked.append("test")
        return self.test_mode


class RecordingAssembler:
    """Captures the configs the wizard asks to build."""

    def __init__(self) -> None:
        self.configs: list[BuildConfig] = []

    def assemble(self, config: BuildConfig) -> BuildOutcome:
        self.configs.append(config)
        return BuildOutcome(destination=Path(config.destination), dry_run=config.test)


def test_guided_build_runs_real_build_with_answers(tmp_path: Path) -> None:
    prompter = ScriptedPrompter(source="Requests", destination="docs/api.md")
    assembler = RecordingAssembler()

    outcome = GuidedBuild(prompter=prompter, assembler=assembler).run(
        BuildConfig(), tmp_path / "bruno-doc.config.json"
    )

    assert [config.test for config in assembler.configs] == [False]
    assert assembler.configs[0].source == "Requests"
    assert assembler.configs[0].destination == "docs/api.md"
    assert outcome is not None and outcome.destination == Path("docs/api.md")
    assert prompter.asked == ["source", "destination", "test", "save"]


def test_guided_build_tests_then_builds_when_confirmed(tmp_path: Path) -> None:
    prompter = ScriptedPrompter(source="Requests", destination="api.md", test_mode=True)
    assembler = RecordingAssembler()

    GuidedBuild(prompter=prompter, assembler=assembler).run(
        BuildConfig(), tmp_path / "bruno-doc.config.json"
    )

    assert [config.test for config in assembler.configs] == [True, False]
    assert "build" in prompter.asked


def test_guided_build_stops_after_test_when_declined(tmp_path: Path) -> None:
    prompter = ScriptedPrompter(
        source="Requests", destination="api.md", test_mode=True, build=False
    )
    assembler = RecordingAssembler()

    outcome = GuidedBuild(prompter=prompter, assembler=assembler).run(
        BuildConfig(), tmp_path / "bruno-doc.config.json"
    )

    assert outcome is None
    assert [config.test for config in assembler.configs] == [True]


def test_guided_build_saves_answers_when_asked(tmp_path: Path) -> None:
    config_file = tmp_path / "bruno-doc.config.json"
    prompter = ScriptedPrompter(source="Requests", destination="docs/api.md", save=True)

    GuidedBuild(prompter=prompter, assembler=RecordingAssembler()).run(BuildConfig(), config_file)

    data = json.loads(config_file.read_text(encoding="utf-8"))
    assert data["source"] == "Requests"
    assert data["destination"] == "docs/api.md"


def test_guided_build_end_to_end(
    collection, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    collection.write({"widget.bru": "meta {\n  name: Widget\n}\n"})
    monkeypatch.chdir(tmp_path)
    prompter = ScriptedPrompter(source="Collections", destination="documentation/api.md")

    outcome = GuidedBuild(prompter=prompter).run(BuildConfig(), "bruno-doc.config.json")

    assert outcome is not None and outcome.written
    content = (tmp_path / "documentation" / "api.md").read_text(encoding="utf-8")
    assert "## Widget" in content
