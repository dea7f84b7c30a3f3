"""Console entry point running the bootstrap sequence.

Purpose
-------
Expose ``python -m bootlog`` and the ``bootlog`` console script. Without
options the command installs the logging sink and runs both reporters.

Contents
--------
* :func:`cli` - Click command supporting ``--version``, ``--info`` and the
  ``.env`` toggle.
* :func:`main` - test-friendly wrapper returning an exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .bootstrap import run, summary_info


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--version",
    "-V",
    is_flag=True,
    help="Print the installed version and exit.",
)
@click.option(
    "--info",
    is_flag=True,
    help="Print the package metadata banner and exit.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load LOG_* variables from the nearest .env before bootstrapping (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, *, version: bool, info: bool, use_dotenv: bool) -> None:
    """Install the logging sink, then run reporter A and reporter B."""

    if version:
        click.echo(__init__conf__.version)
        return

    if info:
        # ``summary_info`` already returns a string ending with a newline.
        click.echo(summary_info(), nl=False)
        return

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    run()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command in a test-friendly manner.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).

    Returns
    -------
    int
        Zero on success, the Click error's exit code on usage errors. A failed
        sink installation propagates as :class:`SystemExit`.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    1.0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
