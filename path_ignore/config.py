"""Load and validate the optional path-ignore config file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from path_ignore.constants import GITIGNORE_FILENAME
from path_ignore.errors import (
    InvalidConfigFormatError,
    InvalidConfigSchemaError,
    MissingConfigFileError,
)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"


@dataclass(frozen=True)
class IgnoreConfig:
    root: Path
    rule_files: tuple[Path, ...] = (Path(GITIGNORE_FILENAME),)
    extra_patterns: tuple[str, ...] = ()
    include_defaults: bool = True


def _config_validator() -> Draft202012Validator:
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def _validate(path: Path, payload: Any) -> None:
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(path, "must be a mapping")
    errors = sorted(
        _config_validator().iter_errors(payload), key=lambda item: list(item.path)
    )
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.path) or "<root>"
        raise InvalidConfigSchemaError(path, f"{location}: {first.message}")


def load_config(path: Path) -> IgnoreConfig:
    if not path.exists():
        raise MissingConfigFileError(path)

    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise InvalidConfigFormatError(path, str(exc)) from exc

    if payload is None:
        payload = {}
    _validate(path, payload)

    payload.setdefault("include_defaults", True)
    payload.setdefault("rule_files", [GITIGNORE_FILENAME])
    payload.setdefault("extra_patterns", [])

    return IgnoreConfig(
        root=path.resolve().parent,
        rule_files=tuple(Path(item) for item in payload["rule_files"]),
        extra_patterns=tuple(str(item) for item in payload["extra_patterns"]),
        include_defaults=bool(payload["include_defaults"]),
    )
