import logging

import typer

from docthread.common import bus
from docthread.needle import L, needle
from .rendering import CliRenderer

from .commands.strip import strip_command
from .commands.parse import parse_command
from .commands.links import links_command

app = typer.Typer(
    name="docthread",
    help=needle.get(L.cli.app.description),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=needle.get(L.cli.option.verbose.help)
    ),
):
    # The CLI is the composition root: it picks the renderer and log level.
    bus.set_renderer(CliRenderer(verbose=verbose))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="strip", help=needle.get(L.cli.command.strip.help))(strip_command)
app.command(name="parse", help=needle.get(L.cli.command.parse.help))(parse_command)
app.command(name="links", help=needle.get(L.cli.command.links.help))(links_command)


if __name__ == "__main__":
    app()
