from pathlib import Path
from typing import Optional

import typer

from docthread.common import bus
from docthread.lang.jsdoc import JsInlineLinkParser
from docthread.needle import L, needle
from docthread.cli.factories import make_adapter, make_config, read_source


def links_command(
    path: Path = typer.Argument(..., dir_okay=False),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help=needle.get(L.cli.option.format.help)
    ),
    replace: bool = typer.Option(
        False, "--replace", help=needle.get(L.cli.option.replace.help)
    ),
):
    config = make_config()
    adapter = make_adapter(config, output_format)
    text = read_source(path, config)

    parser = JsInlineLinkParser()
    if replace:
        result = parser.replace(text)
        count = len(result.links)
        data = result.to_dict()
    else:
        links = parser.parse(text)
        count = len(links)
        data = [link.to_dict() for link in links]

    bus.debug(L.cli.links.summary, count=count, path=str(path))
    typer.echo(adapter.dump(data), nl=False)
