"""Documentation extraction from individual .bru files."""

from __future__ import annotations

import re
from typing import Optional

from jinja2 import Environment, PackageLoader

from .constants import UNDOCUMENTED_TEMPLATE
from .errors import ExtractionError, MissingMetadata, MissingName
from .logging import VERBOSE, get_logger
from .models import SourceFile

# Blocks are flat: the capture stops at the first closing brace and the first
# occurrence in a file wins.
_DOCS_PATTERN = re.compile(r"docs \{([^}]*)\}")
_META_PATTERN = re.compile(r"meta \{([^}]*)\}")
_NAME_PATTERN = re.compile(r"^[ \t]*name:[ \t]*(.*)$", re.IGNORECASE | re.MULTILINE)


def docs_block(content: str) -> Optional[str]:
    """Return the interior of the first ``docs { ... }`` block, verbatim."""
    match = _DOCS_PATTERN.search(content)
    return match.group(1) if match else None


def meta_block(content: str) -> str:
    """Return the interior of the first ``meta { ... }`` block."""
    match = _META_PATTERN.search(content)
    if match is None:
        raise MissingMetadata("Meta section is required to be a valid .bru file; skipping")
    return match.group(1)


def endpoint_name(metadata: str) -> str:
    """Return the trimmed ``name:`` value declared in a meta block."""
    match = _NAME_PATTERN.search(metadata)
    name = match.group(1).strip() if match else ""
    if not name:
        raise MissingName("A name is required to be a valid .bru file; skipping")
    return name


def _default_environment() -> Environment:
    return Environment(
        loader=PackageLoader("brudoc", "templates"),
        autoescape=False,
        keep_trailing_newline=True,
    )


class DocExtractor:
    """Turns a .bru file into the Markdown it contributes to the output."""

    def __init__(self, *, silent: bool = False, environment: Environment | None = None) -> None:
        self.silent = silent
        self._environment = environment or _default_environment()
        self.logger = get_logger("extractor")

    def placeholder(self, name: str) -> str:
        """Render the stand-in text for an endpoint without a docs block."""
        template = self._environment.get_template(UNDOCUMENTED_TEMPLATE)
        return template.render(name=name)

    def extract_text(self, content: str, label: str = "<memory>") -> Optional[str]:
        """Return documentation for ``content`` or None when it contributes nothing."""
        documentation = docs_block(content)
        if documentation is not None:
            return documentation

        try:
            name = endpoint_name(meta_block(content))
        except ExtractionError as exc:
            if not self.silent:
                self.logger.warning("%s: %s", label, exc)
            return None

        self.logger.log(VERBOSE, "%s: no docs section; using placeholder for '%s'", label, name)
        return self.placeholder(name)

    def extract(self, source: SourceFile) -> Optional[str]:
        """Read ``source`` and return the documentation it contributes."""
        try:
            content = source.path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            if not self.silent:
                self.logger.warning("%s: file is not valid UTF-8 text; skipping", source.basename)
            return None
        except OSError as exc:
            if not self.silent:
                self.logger.warning(
                    "%s: unable to read file (%s); skipping",
                    source.basename,
                    exc.strerror or exc,
                )
            return None
        return self.extract_text(content, source.basename)
