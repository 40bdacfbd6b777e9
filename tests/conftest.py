from __future__ import annotations

import io
import logging
from typing import Iterator

import pytest
from rich.console import Console

from lib_read_line import config as read_config


@pytest.fixture
def record_console() -> Console:
    return Console(file=io.StringIO(), record=True, width=200)


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    """Reset shared dotenv state around each test."""

    read_config._reset_dotenv_state_for_testing()
    yield
    read_config._reset_dotenv_state_for_testing()


@pytest.fixture(autouse=True)
def _restore_logger_disabled_state() -> Iterator[None]:
    """Undo logger disabling done by third-party ``dictConfig`` calls (e.g. import-linter)."""

    manager = logging.Logger.manager
    before = {name: lg.disabled for name, lg in manager.loggerDict.items() if isinstance(lg, logging.Logger)}
    yield
    for name, lg in manager.loggerDict.items():
        if isinstance(lg, logging.Logger):
            lg.disabled = before.get(name, False)
