"""Command-line front end built on rich-click.

Purpose
-------
Offer ``lib_read_line read FILE`` as a smoke test of :func:`read_line` against
real files and pipes, plus the metadata banner used by packaging checks.

Contents
--------
* :func:`cli` - root group (``--traceback``, ``--use-dotenv``, ``--log-level``).
* :func:`cli_info`, :func:`cli_read` - subcommands.
* :func:`main` - entry point wrapping :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer: translates :class:`~lib_read_line.domain.result.Err`
values into styled stderr output and ``sysexits`` codes.
"""

from __future__ import annotations

import logging
import os
from typing import BinaryIO, Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as config_module
from .adapters.console.rich_console import RichConsoleAdapter
from .application.ports.console import FailureConsolePort
from .domain.result import Err
from .lib_read_line import read_line, summary_info
from .logs import configure_logging

logger = logging.getLogger(__name__)

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def make_failure_console(*, no_color: bool) -> FailureConsolePort:
    """Return the console that renders read failures on stderr."""

    return RichConsoleAdapter(no_color=no_color)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show the full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (also via {config_module.DOTENV_ENV_VAR}).",
)
@click.option(
    "--log-level",
    default=None,
    metavar="LEVEL",
    help=f"Log level for diagnostics (default from {config_module.LOG_LEVEL_ENV_VAR}, else WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool, log_level: str | None) -> None:
    """Root command storing global flags and printing the banner by default."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    try:
        level = config_module.resolve_log_level(log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc
    configure_logging(level)

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("read", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("rb"), default="-", required=False)
@click.option("--no-color", is_flag=True, default=False, help="Render failures without colour.")
@click.pass_context
def cli_read(ctx: click.Context, source: BinaryIO, no_color: bool) -> None:
    """Read SOURCE (default: stdin) to the end and echo it as text.

    Exits with 74 when the source cannot be read and 65 when it is not UTF-8.
    """

    name = getattr(source, "name", "<stdin>")
    result = read_line(source)
    if isinstance(result, Err):
        logger.debug("reading %s failed: %r", name, result.error.cause)
        make_failure_console(no_color=no_color).emit(result.error, colorize=not no_color)
        ctx.exit(result.error.kind.exit_code)
    text = result.unwrap()
    logger.debug("read %d characters from %s", len(text), name)
    click.echo(text, nl=False)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through :mod:`lib_cli_exit_tools` and return the exit code.

    Parameters
    ----------
    argv:
        Optional argument list (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Reset the global traceback preferences after the run so embedding
        callers and tests are not affected by ``--traceback``.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "make_failure_console"]
