"""Parsing dingus config files into a flat variable map."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import yaml

from .errors import ConfigIOError, MalformedConfigError

logger = logging.getLogger(__name__)

VariableMap = Dict[str, str]


def parse_config_text(text: str, path: Path) -> VariableMap:
    """Decode YAML text into a VariableMap.

    Scalars are kept exactly as written (`0755` stays `0755`, `yes` stays
    `yes`), so keys and values are always strings. An empty document yields
    an empty map. Anything other than a flat mapping is rejected as a whole.
    """
    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise MalformedConfigError(path, str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedConfigError(
            path, f"expected a mapping of names to values, got {type(data).__name__}"
        )

    variables: VariableMap = {}
    for key, value in data.items():
        if not isinstance(key, str) or key == "":
            raise MalformedConfigError(path, f"invalid variable name {key!r}")
        if not isinstance(value, str):
            raise MalformedConfigError(
                path, f"value of {key} must be a scalar, got {type(value).__name__}"
            )
        variables[key] = value
    return variables


def parse_config_file(path: Path) -> VariableMap:
    """Read and decode a config file, all or nothing."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ConfigIOError(path, e) from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedConfigError(path, f"not valid UTF-8 ({e})") from e

    variables = parse_config_text(text, path)
    logger.debug("Parsed %d variable(s) from %s", len(variables), path)
    return variables
