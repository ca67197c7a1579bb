"""
Configuration loading and merging.

Settings are layered: built-in defaults, then an optional JSON config file
(`enum-arrays.json` in the output directory, or an explicit path), then
command-line options. Keys use the same camelCase spelling as the plugin
configuration of the host generator, so an existing plugin block can be
copied into the JSON file as-is.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from constants import DEFAULT_CONFIG
from core.exceptions import ConfigError
from core.file_io import FileReader, FilesystemFileReader
from models import EnumArraysConfig

_STRING_KEYS = frozenset({"name", "output", "input", "arrayPrefix"})
_PATTERN_KEYS = frozenset({"includePatterns", "excludePatterns"})
_BOOL_KEYS = frozenset({"debug"})
_KNOWN_KEYS = _STRING_KEYS | _PATTERN_KEYS | _BOOL_KEYS


def default_config() -> EnumArraysConfig:
    """Return a fresh copy of the default settings."""
    return EnumArraysConfig(**DEFAULT_CONFIG)


def define_config(**overrides: Any) -> EnumArraysConfig:
    """
    Defaults merged with the given overrides.

    Example:
        >>> define_config(arrayPrefix="ENUM_")["arrayPrefix"]
        'ENUM_'
    """
    return merge_config(default_config(), overrides)


def merge_config(
    base: Mapping[str, Any], overrides: Mapping[str, Any]
) -> EnumArraysConfig:
    """
    Layer `overrides` on top of `base`.

    Override values of None are ignored, so unset command-line options do not
    clobber values coming from a config file.

    Raises:
        ConfigError: If an override key is unknown or its value has the wrong type.
    """
    present = {key: value for key, value in overrides.items() if value is not None}
    validate_config(present)

    merged = dict(base)
    merged.update(present)
    return EnumArraysConfig(**merged)


def load_config_file(
    path: Path, file_reader: FileReader | None = None
) -> EnumArraysConfig:
    """
    Load settings from a JSON config file.

    Args:
        path: Location of the JSON file.
        file_reader: Reader used to load the file. Defaults to FilesystemFileReader.

    Returns:
        The settings found in the file, or an empty mapping if it does not exist.

    Raises:
        ConfigError: If the file is not a JSON object of known, well-typed keys.
        FileReadError: If the file exists but cannot be read.
    """
    if not path.is_file():
        return EnumArraysConfig()

    reader = file_reader if file_reader is not None else FilesystemFileReader()
    content = reader.read_file(path)
    if not content.strip():
        return EnumArraysConfig()

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file is not valid JSON: {path} ({e.msg})") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a JSON object: {path}")

    validate_config(data)
    return EnumArraysConfig(**data)


def validate_config(data: Mapping[str, Any]) -> None:
    """
    Check keys and value types of a (partial) configuration.

    Raises:
        ConfigError: On the first unknown key or wrongly typed value.
    """
    for key, value in data.items():
        if key not in _KNOWN_KEYS:
            raise ConfigError(f"Unknown configuration key: {key}", key=key)

        if value is None:
            continue

        if key in _STRING_KEYS and not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string", key=key)

        if key in _BOOL_KEYS and not isinstance(value, bool):
            raise ConfigError(f"'{key}' must be true or false", key=key)

        if key in _PATTERN_KEYS and not (
            isinstance(value, (list, tuple)) and all(isinstance(p, str) for p in value)
        ):
            raise ConfigError(f"'{key}' must be a list of strings", key=key)
