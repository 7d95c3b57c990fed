"""Error types raised by dingus.

Core functions raise these; the CLI catches `DingusError` once and turns it
into a message on stderr plus a process exit code.
"""

from __future__ import annotations

from pathlib import Path


class DingusError(Exception):
    """Base class for every failure dingus reports to the user."""

    exit_code: int = 1


class ConfigIOError(DingusError):
    """Reading the config file failed (missing, permissions, I/O)."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Couldn't read config file {path}: {cause.strerror or cause}")


class MalformedConfigError(DingusError):
    """The config file exists but isn't a flat mapping of scalars."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"The config file {path} isn't valid: {detail}")


class ConfigNotFoundError(DingusError):
    def __init__(self, message: str = "Couldn't find a YAML file to load"):
        super().__init__(message)


class UnrecognizedConfigExtensionError(DingusError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"The config file {path} doesn't have a .yaml or .yml extension"
        )


class ConflictingConfigPathsError(DingusError):
    """Both extension variants of an extension-less name exist."""

    def __init__(self, one: Path, two: Path):
        self.one = one
        self.two = two
        super().__init__(
            "Found two conflicting config files, specify the file extension "
            f"or consider renaming them:\n{one}\n{two}"
        )


class ConfigDirNotFoundError(DingusError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The config folder {path} doesn't exist")


class ShellNotSetError(DingusError):
    exit_code = 2

    def __init__(self):
        super().__init__(
            "Looks like your $SHELL environment variable isn't set, pass --shell instead"
        )


class BadShellError(DingusError):
    def __init__(self, shell: str, cause: OSError):
        self.shell = shell
        self.cause = cause
        super().__init__(f"Couldn't start shell {shell!r}: {cause.strerror or cause}")
