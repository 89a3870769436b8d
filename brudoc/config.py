"""Configuration loading for bruno-doc (bruno-doc.config.json)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

import yaml
from pydantic import ValidationError

from .constants import (
    DEFAULT_CONFIG_FILE_NAME,
    DEFAULT_DESTINATION,
    DEFAULT_EXCLUDES,
    DEFAULT_HEADER,
    DEFAULT_LOG_FILE_NAME,
    DEFAULT_SOURCE,
    DEFAULT_TAIL,
)
from .errors import BrudocError
from .logging import VERBOSE, get_logger
from .schema import ConfigSchema, known_keys, known_log_option_keys

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .prompts import Prompter

logger = get_logger("config")


class ConfigError(BrudocError):
    """Raised when the configuration file cannot be read or validated."""


@dataclass
class LogOptions:
    """Console verbosity settings."""

    silent: bool = False
    verbose: bool = False


@dataclass
class BuildConfig:
    """Effective settings for a documentation build."""

    source: str = DEFAULT_SOURCE
    destination: str = DEFAULT_DESTINATION
    header: Optional[str] = None
    tail: Optional[str] = None
    excludes: List[str] = field(default_factory=list)
    force: bool = False
    debug: bool = False
    test: bool = False
    log_options: LogOptions = field(default_factory=LogOptions)

    @property
    def silent(self) -> bool:
        return self.log_options.silent

    @property
    def verbose(self) -> bool:
        return self.log_options.verbose

    def to_dict(self) -> Dict[str, Any]:
        """Return the config file representation of these settings."""
        data: Dict[str, Any] = {
            "source": self.source,
            "destination": self.destination,
        }
        if self.header:
            data["header"] = self.header
        if self.tail:
            data["tail"] = self.tail
        data["excludes"] = list(self.excludes)
        data["force"] = self.force
        data["debug"] = self.debug
        data["logOptions"] = {
            "silent": self.log_options.silent,
            "verbose": self.log_options.verbose,
        }
        return data


def default_config_data(*, include_optional: bool = False) -> Dict[str, Any]:
    """Return the built-in configuration used when no file is present."""
    data: Dict[str, Any] = {
        "source": DEFAULT_SOURCE,
        "destination": DEFAULT_DESTINATION,
        "excludes": list(DEFAULT_EXCLUDES),
        "logOptions": {"silent": False, "verbose": False},
    }
    if include_optional:
        data["header"] = DEFAULT_HEADER
        data["tail"] = DEFAULT_TAIL
        data["force"] = False
        data["debug"] = False
    return data


def resolve_config_path(config_file: str | Path | None) -> Path:
    """Resolve the requested config file against the working directory."""
    path = Path(config_file or DEFAULT_CONFIG_FILE_NAME).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


_YAML_SUFFIXES = (".yml", ".yaml")


def _parse_config_text(path: Path, text: str) -> Any:
    if not text.strip():
        return None
    if path.suffix.lower() in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def read_config_file(config_file: str | Path | None) -> Dict[str, Any]:
    """Read raw configuration data, falling back to the built-in defaults."""
    path = resolve_config_path(config_file)
    logger.debug("Requested config file is '%s'.", path)

    if not path.exists():
        logger.debug("Config file '%s' does not exist; using defaults.", path)
        return default_config_data()

    logger.info("Reading config file: '%s'.", path)
    try:
        text = path.read_text(encoding="utf-8")
        data = _parse_config_text(path, text)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("%s", exc)
        raise ConfigError(
            f"Error reading config file; see {DEFAULT_LOG_FILE_NAME} for details."
        ) from exc

    if not isinstance(data, dict):
        logger.error("Problem reading config file.")
        raise ConfigError(f"{path.name} must contain a mapping at the root")

    logger.log(VERBOSE, "Config is:\n%s", json.dumps(data, indent=2))
    return data


def _describe_error(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error["loc"])
    if error["type"] == "missing":
        return f"{location} is required"
    if error["type"] == "value_error":
        return f"{location}: {error['ctx']['error']}"
    return f"{location}: {error['msg']}"


def validate_config(data: Mapping[str, Any]) -> ConfigSchema:
    """Validate raw configuration data; unknown keys only produce a warning."""
    unknown = sorted(key for key in data if key not in known_keys())
    log_data = data.get("logOptions")
    if isinstance(log_data, Mapping):
        unknown.extend(
            f"logOptions.{key}" for key in sorted(log_data) if key not in known_log_option_keys()
        )
    if unknown:
        logger.warning(
            "Unsupported key(s) in configuration file: %s; ignoring", ", ".join(unknown)
        )

    try:
        schema = ConfigSchema.model_validate(data)
    except ValidationError as exc:
        for error in exc.errors():
            logger.error(_describe_error(error))
        raise ConfigError(
            f"Error validating config file; see {DEFAULT_LOG_FILE_NAME} for details"
        ) from exc

    if schema.log_options.verbose and schema.log_options.silent:
        logger.warning("Verbose and silent are mutually exclusive; ignoring both.")
        schema.log_options.verbose = False
        schema.log_options.silent = False
    return schema


def config_from_schema(schema: ConfigSchema) -> BuildConfig:
    """Fill in defaults for keys the config file omitted."""
    return BuildConfig(
        source=schema.source,
        destination=schema.destination,
        header=schema.header,
        tail=schema.tail,
        excludes=list(schema.excludes or []),
        force=bool(schema.force),
        debug=bool(schema.debug),
        log_options=LogOptions(
            silent=bool(schema.log_options.silent),
            verbose=bool(schema.log_options.verbose),
        ),
    )


def apply_overrides(config: BuildConfig, overrides: Mapping[str, Any]) -> BuildConfig:
    """Return a copy of ``config`` with truthy command line values applied."""
    updated = replace(config, log_options=replace(config.log_options))
    for key in ("source", "destination", "header", "tail"):
        if overrides.get(key):
            setattr(updated, key, str(overrides[key]))
    if isinstance(overrides.get("excludes"), (list, tuple)):
        updated.excludes = [str(item) for item in overrides["excludes"]]
    for key in ("force", "debug", "test"):
        if overrides.get(key):
            setattr(updated, key, True)
    if overrides.get("silent"):
        updated.log_options.silent = True
    if overrides.get("verbose"):
        updated.log_options.verbose = True
    return updated


def load_config(
    config_file: str | Path | None = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> BuildConfig:
    """Read, validate and complete the configuration, then apply CLI overrides."""
    data = read_config_file(config_file)
    config = config_from_schema(validate_config(data))
    if overrides:
        config = apply_overrides(config, overrides)
    logger.debug("Effective configuration: %s", config)
    return config


def save_config(config: BuildConfig, config_file: str | Path | None, prompter: "Prompter") -> bool:
    """Merge ``config`` into the config file after asking the user.

    Returns True when the file was written.
    """
    path = resolve_config_path(config_file)
    data = config.to_dict()

    if path.exists():
        try:
            existing = _parse_config_text(path, path.read_text(encoding="utf-8")) or {}
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.error("Problem reading '%s'; aborting!", path)
            raise ConfigError(f"Unable to read {path}: {exc}") from exc
        if not isinstance(existing, dict):
            raise ConfigError(f"{path.name} must contain a mapping at the root")
        merged = {**existing, **data}
        if merged == existing:
            logger.log(VERBOSE, "Configuration unchanged; not saving '%s'.", path)
            return False
        data = merged

    if not prompter.confirm_save_config():
        return False

    logger.log(VERBOSE, "Writing config file to '%s'", path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.error("Error saving configuration file to '%s': %s", path, exc)
        raise ConfigError(f"Unable to write {path}: {exc}") from exc
    logger.log(VERBOSE, "Configuration file updated!")
    return True


def init_config(config_file: str | Path | None = None, *, force: bool = False) -> Path:
    """Write a configuration file populated with the defaults."""
    path = resolve_config_path(config_file)
    if path.exists() and not force:
        raise FileExistsError(f"Config file already exists at {path}; use --force to overwrite.")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(default_config_data(include_optional=True), indent=2) + "\n",
        encoding="utf-8",
    )
    logger.info("Configuration file written to '%s'.", path)
    return path


__all__ = [
    "BuildConfig",
    "ConfigError",
    "LogOptions",
    "apply_overrides",
    "config_from_schema",
    "default_config_data",
    "init_config",
    "load_config",
    "read_config_file",
    "resolve_config_path",
    "save_config",
    "validate_config",
]
