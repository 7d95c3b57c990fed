from __future__ import annotations

import os
from pathlib import Path

APP = "dingus"

# Fixed name looked for in every ancestor during implicit discovery
MARKER_FILENAME = ".dingus"

# Canonical first; both decode with the same YAML parser
CONFIG_EXTENSIONS = ("yaml", "yml")

# Nesting depth exported to child shells
LEVEL_ENV_VAR = "DINGUS_LEVEL"

CONFIG_DIR_ENV_VAR = "DINGUS_CONFIG_DIR"


def config_dir() -> Path:
    """
    Folder holding the named config files:
      - $DINGUS_CONFIG_DIR when set
      - Windows: %APPDATA%\\dingus
      - macOS/Linux: $XDG_CONFIG_HOME/dingus or ~/.config/dingus
    """
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    if os.name == "nt":
        base = os.environ.get("APPDATA") or str(Path.home())
        return Path(base) / APP
    return Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))) / APP


def has_config_extension(path: Path) -> bool:
    return path.suffix[1:] in CONFIG_EXTENSIONS
