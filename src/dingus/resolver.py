"""Turning (explicit name | current directory) into the final environment."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigNotFoundError, ConflictingConfigPathsError
from .level import set_level
from .locator import Conflict, ExplicitConfig, NotFound, SearchResult, locate
from .parser import VariableMap, parse_config_file


def config_path_from_result(result: SearchResult) -> Path:
    if isinstance(result, Conflict):
        raise ConflictingConfigPathsError(result.one, result.two)
    if isinstance(result, NotFound):
        raise ConfigNotFoundError()
    return result.path


def resolve_environment(
    explicit: Optional[ExplicitConfig],
    start_dir: Path,
    environ: Optional[Mapping[str, str]] = None,
) -> VariableMap:
    """Locate, parse and level-annotate the config for one invocation.

    Returns a complete mapping or raises a `DingusError`; there is no
    partial result and no fallback mapping.
    """
    path = config_path_from_result(locate(explicit, start_dir))
    variables = parse_config_file(path)
    set_level(variables, environ)
    return variables
