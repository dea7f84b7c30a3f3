"""Process bootstrap: install the logging sink, then run both reporters.

Purpose
-------
Wire the two independently shipped reporting functions behind a sink that
must exist before either runs. Both reporters export a function called
``log``; they are imported under ``log_a`` / ``log_b`` so the names never
collide.

Contents
--------
* :data:`FAILED_INIT_MESSAGE` – prefix of the fatal diagnostic.
* :func:`run` – the bootstrap sequence.
* :func:`summary_info` – metadata banner used by the CLI.
"""

from __future__ import annotations

import logging

from reporter_a import log as log_a
from reporter_b import log as log_b

from . import runtime

FAILED_INIT_MESSAGE = "Failed to initialize logger"

logger = logging.getLogger(__name__)


def run() -> None:
    """Install the sink, then call ``log_a`` and ``log_b`` in that order.

    Side Effects
    ------------
    Installs the process-wide sink. When installation fails the process is
    terminated through :class:`SystemExit` carrying
    ``"Failed to initialize logger: <reason>"``; the interpreter prints it on
    stderr and exits with status 1, and neither reporter runs.

    Configuration comes only from the sink's ``LOG_*`` environment variables,
    so a malformed value there is as fatal as a second initialisation.
    """

    try:
        runtime.init()
    except (runtime.LoggerInitError, ValueError) as exc:
        raise SystemExit(f"{FAILED_INIT_MESSAGE}: {exc}") from exc

    logger.debug("logging sink installed")
    log_a()
    log_b()


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["FAILED_INIT_MESSAGE", "run", "summary_info"]
