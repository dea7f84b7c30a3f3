"""Reporter B: announces itself through the stdlib logging facade."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log() -> None:
    """Emit the ``B`` record at ``INFO``."""

    logger.info("B")


__all__ = ["log"]
