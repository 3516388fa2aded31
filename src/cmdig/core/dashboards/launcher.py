"""Opening resolved dashboard URLs."""

from __future__ import annotations

import logging

from cmdig.core.process import ExitStatus, run_command

logger = logging.getLogger(__name__)


def open_url(url: str, opener: str = "open") -> ExitStatus:
    """
    Open ``url`` with the external opener command.

    Failures are not raised: the caller decides what to do with the
    returned status (the CLI uses it as its exit code).
    """
    status = run_command([opener, url])
    if not status.ok:
        logger.debug("Opener %s returned %s", opener, status)
    return status
