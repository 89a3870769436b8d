"""Shared defaults for configuration and the build pipeline."""

from __future__ import annotations

BRU_EXTENSION = ".bru"

DEFAULT_CONFIG_FILE_NAME = "bruno-doc.config.json"
DEFAULT_LOG_FILE_NAME = "bruno-doc.log"

DEFAULT_SOURCE = "Collections"
DEFAULT_DESTINATION = "documentation/api.md"
DEFAULT_HEADER = "documentation/header.md"
DEFAULT_TAIL = "documentation/tail.md"
DEFAULT_EXCLUDES: tuple[str, ...] = ("collections.bru", "Local.bru")

UNDOCUMENTED_TEMPLATE = "undocumented.md.j2"


__all__ = [
    "BRU_EXTENSION",
    "DEFAULT_CONFIG_FILE_NAME",
    "DEFAULT_DESTINATION",
    "DEFAULT_EXCLUDES",
    "DEFAULT_HEADER",
    "DEFAULT_LOG_FILE_NAME",
    "DEFAULT_SOURCE",
    "DEFAULT_TAIL",
    "UNDOCUMENTED_TEMPLATE",
]
