from __future__ import annotations

import logging
import os
import re
import shlex
import signal
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from .errors import BadShellError, ShellNotSetError

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class ShellKind(str, Enum):
    """Export dialects dingus knows how to write."""
    BASH_LIKE = "bash"      # bash, zsh, sh, dash, ...
    FISH = "fish"


@dataclass(frozen=True)
class Shell:
    command: str            # what gets executed for a session
    kind: ShellKind

    @property
    def name(self) -> str:
        return Path(self.command).name


def detect_shell(requested: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Shell:
    """Pick the shell from --shell, falling back to $SHELL."""
    environ = os.environ if environ is None else environ
    command = requested or environ.get("SHELL")
    if not command:
        raise ShellNotSetError()

    kind = ShellKind.FISH if Path(command).name == "fish" else ShellKind.BASH_LIKE
    return Shell(command=command, kind=kind)


def _fish_quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def export_statement(shell: Shell, key: str, value: str) -> str:
    if shell.kind == ShellKind.FISH:
        return f"set -gx {key} {_fish_quote(value)};"
    return f"export {key}={shlex.quote(value)};"


def is_valid_name(key: str) -> bool:
    return _IDENTIFIER_RE.fullmatch(key) is not None


def format_exports(shell: Shell, variables: Mapping[str, str]) -> str:
    """Export statements sorted by name.

    Names that aren't shell identifiers are skipped with a warning.
    """
    statements = []
    for key in sorted(variables):
        if not is_valid_name(key):
            logger.warning("Skipping %r: not a valid environment variable name", key)
            continue
        statements.append(export_statement(shell, key, variables[key]))
    return " ".join(statements)


def _ignore_signal(signum, frame) -> None:
    pass


def run_session(shell: Shell, variables: Mapping[str, str], cwd: Optional[str] = None) -> int:
    """Start an interactive shell with `variables` layered over our environment.

    Blocks until the shell exits and returns its exit code.
    """
    env = dict(os.environ)
    env.update(variables)

    # fish shares our process group, Ctrl+C must not kill the parent.
    # Needs a handler rather than SIG_IGN: ignored signals survive exec.
    previous = None
    if shell.kind == ShellKind.FISH:
        previous = signal.signal(signal.SIGINT, _ignore_signal)

    logger.debug("Starting %s with %d extra variable(s)", shell.command, len(variables))
    try:
        p = subprocess.run([shell.command], env=env, cwd=cwd)
    except OSError as e:
        raise BadShellError(shell.command, e) from e
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)

    return p.returncode
