from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .config import has_config_extension

logger = logging.getLogger(__name__)


def _printable_name(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def list_config_files(directory: Path) -> List[str]:
    """Names of the .yaml/.yml entries directly inside `directory`, sorted.

    Only names are inspected, no file is opened. Names that aren't valid
    UTF-8 are skipped. Failing to read the folder itself propagates.
    """
    names = []
    for entry in directory.iterdir():
        if not has_config_extension(entry):
            continue
        if not _printable_name(entry.name):
            logger.debug("Skipping undecodable file name %r", entry.name)
            continue
        names.append(entry.name)

    names.sort()
    logger.debug("Found %d config file(s) in %s", len(names), directory)
    return names
