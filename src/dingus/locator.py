"""Locating the config file for an invocation.

Two strategies:
- explicit: a name inside the config folder, with or without extension
- implicit: the closest `.dingus` marker in the start directory or any of
  its ancestors
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import CONFIG_EXTENSIONS, MARKER_FILENAME, has_config_extension
from .errors import UnrecognizedConfigExtensionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    path: Path


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Conflict:
    """Both extension variants of an extension-less explicit name exist."""
    one: Path
    two: Path


SearchResult = Union[Found, NotFound, Conflict]


@dataclass(frozen=True)
class ExplicitConfig:
    """A config file named by the user, relative to `directory`."""
    directory: Path
    filename: str

    @property
    def path(self) -> Path:
        return self.directory / self.filename


def locate_explicit(ref: ExplicitConfig) -> SearchResult:
    """Resolve an explicitly named config file.

    A recognized extension is accepted without touching the filesystem; a
    missing file surfaces later when it is read. Without an extension both
    variants are checked and exactly one of them has to exist.
    """
    if not ref.filename:
        return NotFound()

    path = ref.path

    if path.suffix:
        if not has_config_extension(path):
            raise UnrecognizedConfigExtensionError(path)
        logger.debug("Using explicit config %s", path)
        return Found(path)

    candidates = [path.with_name(f"{path.name}.{ext}") for ext in CONFIG_EXTENSIONS]
    existing = [c for c in candidates if c.exists()]
    logger.debug("Explicit candidates %s, existing %s", candidates, existing)

    if len(existing) == 2:
        return Conflict(*existing)
    if existing:
        return Found(existing[0])
    return NotFound()


def find_nearest(start_dir: Path) -> Optional[Path]:
    """Return the closest marker file at or above `start_dir`, if any."""
    # Lexical: the walk follows the path as given, not symlink targets
    start = Path(os.path.abspath(start_dir))
    for directory in (start, *start.parents):
        candidate = directory / MARKER_FILENAME
        logger.debug("Checking %s", candidate)
        if candidate.exists():
            return candidate
    return None


def locate(explicit: Optional[ExplicitConfig], start_dir: Path) -> SearchResult:
    if explicit is not None:
        return locate_explicit(explicit)

    nearest = find_nearest(start_dir)
    if nearest is None:
        logger.debug("No %s marker between %s and the root", MARKER_FILENAME, start_dir)
        return NotFound()
    logger.debug("Found marker %s", nearest)
    return Found(nearest)
