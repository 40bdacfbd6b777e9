"""Environment-driven configuration for the CLI.

Purpose
-------
Centralise the few knobs the command-line front end reads from the
environment, and the opt-in loading of a nearby ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` / :func:`should_use_dotenv` / :func:`enable_dotenv`.
* :data:`LOG_LEVEL_ENV_VAR` / :func:`resolve_log_level`.

System Role
-----------
Consumed by :mod:`lib_read_line.cli`. The library function
:func:`lib_read_line.read_line` takes no configuration at all.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LIB_READ_LINE_USE_DOTENV"
LOG_LEVEL_ENV_VAR = "LIB_READ_LINE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit CLI flag wins; otherwise ``env_value`` must be truthy.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="ON")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upwards from ``search_from`` (defaults to the working
    directory). Only the first call per process does any work; later calls
    return the path found the first time.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED, _DOTENV_PATH

    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return _DOTENV_PATH
        if search_from is None:
            found = find_dotenv(usecwd=True)
        else:
            found = _find_upwards(search_from, ".env")
        _DOTENV_LOADED = True
        if not found:
            logger.debug("no .env file found")
            return None
        _DOTENV_PATH = Path(found).resolve()
        load_dotenv(_DOTENV_PATH, override=False)
        logger.debug("loaded environment from %s", _DOTENV_PATH)
        return _DOTENV_PATH


def resolve_log_level(value: str | None = None) -> int:
    """Return the stdlib logging level for ``value`` or the environment.

    Falls back to :data:`LOG_LEVEL_ENV_VAR`, then :data:`DEFAULT_LOG_LEVEL`.

    Raises
    ------
    ValueError
        If the name is not a standard logging level.

    Examples
    --------
    >>> resolve_log_level("debug")
    10
    >>> resolve_log_level(" Error ")
    40
    """

    raw = value if value is not None else os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    normalized = raw.strip().upper()
    level = logging.getLevelName(normalized)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {raw!r}")
    return level


def _find_upwards(start: Path, filename: str) -> str:
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / filename
        if candidate.is_file():
            return str(candidate)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    """Forget any previously loaded ``.env`` so tests start clean."""

    global _DOTENV_LOADED, _DOTENV_PATH

    with _DOTENV_LOCK:
        _DOTENV_LOADED = False
        _DOTENV_PATH = None


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DOTENV_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "enable_dotenv",
    "resolve_log_level",
    "should_use_dotenv",
]
