"""Reporter A: announces itself through the stdlib logging facade.

This package knows nothing about :mod:`bootlog`; whatever sink the host process
installed on the root logger receives the record.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log() -> None:
    """Emit the ``A`` record at ``INFO``."""

    logger.info("A")


__all__ = ["log"]
