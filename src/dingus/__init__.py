"""Dingus: directory-scoped environment loader.

Finds a YAML file of environment variables for the current directory,
either named explicitly from the config folder or discovered by walking
up towards the filesystem root looking for a `.dingus` marker, and then:
- starts a shell session with those variables set
- prints export statements for `eval`
- lists the available config files
"""

from .errors import DingusError
from .resolver import resolve_environment

__version__ = "0.3.0"

__all__ = ["DingusError", "resolve_environment", "__version__"]
