"""Schema for the bruno-doc configuration file."""

from __future__ import annotations

import re
from typing import List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationInfo,
    field_validator,
)

_DESTINATION_PATTERN = re.compile(r'^[^<>:"|?*\x00-\x1f]+\.(md|markdown)$')
_MARKDOWN_PATTERN = re.compile(r"^(?:[\w\-./ ]+/)*[\w\-. ]+\.md$")
_EXCLUDE_PATTERN = re.compile(r"^(?:[\w\-./ ]+/)*[\w\-. ]+\.bru$")
_SOURCE_PATTERN = re.compile(r"^(\.{0,2}/?([\w\- ]+/)*[\w\- ]+/?)$")


class LogOptionsSchema(BaseModel):
    """The ``logOptions`` mapping."""

    model_config = ConfigDict(extra="ignore")

    silent: Optional[StrictBool] = None
    verbose: Optional[StrictBool] = None


class ConfigSchema(BaseModel):
    """Validated shape of ``bruno-doc.config.json``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    debug: Optional[StrictBool] = None
    destination: StrictStr
    excludes: Optional[List[StrictStr]] = None
    force: Optional[StrictBool] = None
    header: Optional[StrictStr] = None
    log_options: LogOptionsSchema = Field(alias="logOptions")
    source: StrictStr
    tail: Optional[StrictStr] = None

    @field_validator("destination")
    @classmethod
    def _check_destination(cls, value: str) -> str:
        if not _DESTINATION_PATTERN.match(value):
            raise ValueError("Destination must be a valid markdown file name")
        return value

    @field_validator("header", "tail")
    @classmethod
    def _check_markdown(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if value is not None and not _MARKDOWN_PATTERN.match(value):
            raise ValueError(f"{info.field_name.capitalize()} must be a valid markdown file name")
        return value

    @field_validator("excludes")
    @classmethod
    def _check_excludes(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is not None and not all(_EXCLUDE_PATTERN.match(item) for item in value):
            raise ValueError("Excludes must be an array of valid bru files")
        return value

    @field_validator("source")
    @classmethod
    def _check_source(cls, value: str) -> str:
        if not _SOURCE_PATTERN.match(value):
            raise ValueError("Source must be a valid folder name")
        return value


def known_keys() -> set[str]:
    """Return the top-level keys the configuration file understands."""
    return {field.alias or name for name, field in ConfigSchema.model_fields.items()}


def known_log_option_keys() -> set[str]:
    return set(LogOptionsSchema.model_fields)


__all__ = ["ConfigSchema", "LogOptionsSchema", "known_keys", "known_log_option_keys"]
