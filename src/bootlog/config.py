"""Optional ``.env`` loading for the ``LOG_*`` configuration variables.

The sink reads its overrides from the process environment. Operators who keep
those variables in a ``.env`` file opt in via ``--use-dotenv`` on the CLI or by
exporting ``LOG_USE_DOTENV=1``; values already present in the environment
always win over the file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_USE_DOTENV"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

logger = logging.getLogger(__name__)

_loaded_path: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether a ``.env`` file should be loaded.

    An explicit CLI choice wins; otherwise ``env_value`` (the content of
    :data:`DOTENV_ENV_VAR`) is interpreted as a boolean flag.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUE_VALUES


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upward from ``search_from`` (default: the current working
    directory). Returns the resolved path of the loaded file, or ``None`` when
    no file was found. Repeated calls return the first loaded path.
    """
    global _loaded_path
    if _loaded_path is not None:
        return _loaded_path

    if search_from is not None:
        candidate = _find_upwards(Path(search_from))
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    if candidate is None:
        logger.debug("no .env file found")
        return None

    resolved = candidate.resolve()
    load_dotenv(resolved, override=False)
    _loaded_path = resolved
    logger.debug("loaded environment from %s", resolved)
    return resolved


def _find_upwards(start: Path) -> Path | None:
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _loaded_path
    _loaded_path = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
