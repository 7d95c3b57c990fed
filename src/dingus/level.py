from __future__ import annotations

import logging
import os
import re
from typing import Mapping, MutableMapping, Optional

from .config import LEVEL_ENV_VAR

logger = logging.getLogger(__name__)

_LEVEL_RE = re.compile(r"\+?[0-9]+")


def current_level(environ: Optional[Mapping[str, str]] = None) -> int:
    """Nesting depth inherited from the parent process (0 when absent or garbage)."""
    environ = os.environ if environ is None else environ
    raw = environ.get(LEVEL_ENV_VAR)
    if raw is None or not _LEVEL_RE.fullmatch(raw):
        return 0
    return int(raw)


def set_level(
    variables: MutableMapping[str, str],
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Write the next nesting depth into `variables`.

    The inherited environment is the source of truth, so a DINGUS_LEVEL set
    inside the config file itself is overwritten.
    """
    level = current_level(environ) + 1
    variables[LEVEL_ENV_VAR] = str(level)
    logger.debug("Setting %s=%d", LEVEL_ENV_VAR, level)
    return level
