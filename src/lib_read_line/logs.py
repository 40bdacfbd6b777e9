"""Logging setup for the command-line front end.

Installs a single :class:`rich.logging.RichHandler` on the package logger.
Library code only ever calls :func:`logging.getLogger`; handlers are the
application's business, so nothing here runs on import.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "lib_read_line"


def configure_logging(level: int, *, console: Console | None = None) -> logging.Logger:
    """Attach a Rich handler to the package logger at ``level``.

    Repeated calls replace the handler installed earlier instead of stacking
    another one.

    Examples
    --------
    >>> from io import StringIO
    >>> log = configure_logging(logging.INFO, console=Console(file=StringIO()))
    >>> log.level == logging.INFO, len(log.handlers)
    (True, 1)
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
