"""
Child process helpers.

Every external command cmdig runs (the dashboard listing command and the
URL opener) goes through run_command(), which always hands back an
ExitStatus instead of raising for a non-zero exit or a missing binary.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import IO, Sequence

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
NOT_STARTED_RETURNCODE = 127


@dataclass(frozen=True)
class ExitStatus:
    """
    Outcome of a child process.

    Attributes:
        returncode: Exit code of the child, or 127 if it never started
        started: Whether the child process was actually spawned
        error: OS error message when the child could not be started
    """

    returncode: int
    started: bool = True
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the child ran and exited with status 0."""
        return self.started and self.returncode == 0

    @classmethod
    def not_started(cls, error: str | None = None) -> ExitStatus:
        """Status for a child that could not be spawned."""
        return cls(returncode=NOT_STARTED_RETURNCODE, started=False, error=error)


def run_command(args: Sequence[str], *, stdout: IO[bytes] | None = None) -> ExitStatus:
    """
    Run a command to completion and report how it exited.

    stdin and stderr are inherited from the controlling terminal so that
    interactive auth prompts from the child still reach the user.

    Args:
        args: Command and arguments
        stdout: Open binary file to stream the child's stdout into
            (inherited when None)

    Returns:
        ExitStatus of the child; ExitStatus.not_started() if it could not
        be spawned
    """
    logger.debug("Running %s", list(args))
    try:
        completed = subprocess.run(list(args), stdout=stdout, check=False)
    except OSError as e:
        logger.debug("Failed to start %s: %s", args[0], e)
        return ExitStatus.not_started(str(e))

    logger.debug("%s exited with %d", args[0], completed.returncode)
    return ExitStatus(returncode=completed.returncode)


__all__ = [
    "ExitStatus",
    "NOT_STARTED_RETURNCODE",
    "run_command",
]
