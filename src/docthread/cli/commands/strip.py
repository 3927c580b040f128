from pathlib import Path
from typing import Optional

import typer

from docthread.common import bus
from docthread.lang.jsdoc import JsCommentStripper
from docthread.needle import L, needle
from docthread.cli.factories import make_config, read_source, write_output


def strip_command(
    path: Path = typer.Argument(..., dir_okay=False),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help=needle.get(L.cli.option.output.help)
    ),
):
    config = make_config()
    source = read_source(path, config)

    stripped = JsCommentStripper().strip(source)

    if output is None:
        typer.echo(stripped, nl=False)
        return

    write_output(output, stripped, config)
    bus.success(L.cli.strip.done, path=str(path), output=str(output))
