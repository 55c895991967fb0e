from __future__ import annotations

from typing import Annotated

import typer

from udpctl.utils.logging import setup_logging

from .commands import config as config_cmd
from .commands.devices import register as register_devices
from .commands.info import register as register_info
from .commands.init import register as register_init
from .commands.setup import register as register_setup

app = typer.Typer(
    help="udpctl - control UDP command-code appliances", no_args_is_help=True
)

app.add_typer(config_cmd.app, name="config")

register_init(app)
register_info(app)
register_devices(app)
register_setup(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-V",
            count=True,
            help="Log more: -V for info, -VV for debug",
        ),
    ] = 0,
) -> None:
    """udpctl CLI."""
    setup_logging(verbose=verbose)

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"udpctl version {get_version('udpctl')}")
        raise typer.Exit()
