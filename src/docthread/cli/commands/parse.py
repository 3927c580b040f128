from pathlib import Path
from typing import Optional

import typer

from docthread.common import bus
from docthread.lang.jsdoc import JsDocCommentExtractor
from docthread.needle import L, needle
from docthread.spec import JsDocError
from docthread.cli.factories import make_adapter, make_config, read_source


def parse_command(
    path: Path = typer.Argument(..., dir_okay=False),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help=needle.get(L.cli.option.format.help)
    ),
    strict: bool = typer.Option(
        False, "--strict", help=needle.get(L.cli.option.strict.help)
    ),
):
    config = make_config()
    adapter = make_adapter(config, output_format)
    source = read_source(path, config)

    try:
        comments = JsDocCommentExtractor(strict=strict).extract(source)
    except JsDocError as e:
        bus.error(L.cli.error.syntax, path=str(path), error=str(e))
        raise typer.Exit(code=1)

    bus.debug(L.cli.parse.summary, count=len(comments), path=str(path))
    typer.echo(adapter.dump([c.to_dict() for c in comments]), nl=False)
