"""Static package metadata shared by the CLI and the metadata banner."""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_read_line"
title = "Read a byte stream into a new string, returned as a result"
version = "0.1.0"
shell_command = "lib_read_line"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer``.

    ``writer`` receives the whole banner as one string ending in a newline;
    it defaults to ``sys.stdout.write``.
    """

    emit = writer if writer is not None else sys.stdout.write
    emit(
        f"Info for {name}:\n"
        f"\n"
        f"    {title}\n"
        f"\n"
        f"    version        = {version}\n"
        f"    shell command  = {shell_command}\n"
    )


__all__ = ["name", "print_info", "shell_command", "title", "version"]
