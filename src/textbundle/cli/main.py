"""TextBundle CLI entrypoint.

A Typer application; each subcommand lives in `textbundle.cli.commands` and
registers itself on `app`.
"""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="textbundle",
    add_completion=False,
    no_args_is_help=True,
    help="Create, extract and inspect TextBundle (.textbundle/.textpack) documents.",
)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    """TextBundle CLI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command("version")
def version() -> None:
    """Print the installed textbundle version."""
    from textbundle import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `textbundle --help` is fast.
    """
    from textbundle.cli.commands import catalog as catalog_cmd
    from textbundle.cli.commands import inspect as inspect_cmd
    from textbundle.cli.commands import pack as pack_cmd
    from textbundle.cli.commands import unpack as unpack_cmd

    pack_cmd.register(app)
    unpack_cmd.register(app)
    inspect_cmd.register(app)
    catalog_cmd.register(app)


_register_commands()
