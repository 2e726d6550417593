"""
Child process plumbing.

Commands are built as token tuples and handed to ``subprocess.run``
directly, so no shell ever interprets them. The child inherits the
parent's standard streams, which lets scanner output stream live to the
console.
"""

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from soos_sast_docker.core.errors import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandLine:
    """An executable plus its arguments."""
    tokens: Tuple[str, ...]

    def __post_init__(self):
        if not self.tokens:
            raise ValueError("A command line needs at least an executable")

    @classmethod
    def of(cls, executable: str, *arguments: Iterable[str]) -> "CommandLine":
        """Build a command from an executable and any number of token groups."""
        tokens = [executable]
        for group in arguments:
            tokens.extend(group)
        return cls(tuple(str(token) for token in tokens))

    @property
    def executable(self) -> str:
        return self.tokens[0]

    @property
    def arguments(self) -> Tuple[str, ...]:
        return self.tokens[1:]

    @property
    def name(self) -> str:
        """Short name used in error messages."""
        return os.path.basename(self.executable)

    def __str__(self) -> str:
        return shlex.join(self.tokens)


def split_options(options: str) -> Tuple[str, ...]:
    """Tokenize a pass-through option string the way a POSIX shell would."""
    if not options:
        return ()
    return tuple(shlex.split(options))


def run_command(command: CommandLine, check: bool = True, display: Optional[str] = None) -> int:
    """
    Run a command to completion and return its exit code.

    With ``check`` set, a non-zero exit code raises CommandError. Failing to
    start the process always raises CommandError. ``display`` replaces the
    command text in the debug log for commands that carry secrets.
    """
    logger.debug(f"Running command: {display or command}")

    try:
        completed = subprocess.run(list(command.tokens), check=False)
    except OSError as e:
        raise CommandError(command.name, reason=str(e)) from e

    if completed.returncode != 0:
        if check:
            raise CommandError(command.name, exit_code=completed.returncode)
        logger.debug(f"{command.name} exited with code {completed.returncode} (ignored)")

    return completed.returncode
