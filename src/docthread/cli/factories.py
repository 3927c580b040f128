from pathlib import Path
from typing import Optional

import typer

from docthread.common import DocumentAdapter, bus, get_adapter
from docthread.config import ConfigError, DocthreadConfig, load_config_from_path
from docthread.needle import L


def get_project_root() -> Path:
    return Path.cwd()


def make_config() -> DocthreadConfig:
    try:
        config = load_config_from_path(get_project_root())
    except ConfigError as e:
        bus.error(L.cli.error.config, error=str(e))
        raise typer.Exit(code=1)

    if config.source:
        bus.debug(L.cli.config.loaded, path=str(config.source))
    return config


def make_adapter(
    config: DocthreadConfig, output_format: Optional[str]
) -> DocumentAdapter:
    fmt = output_format or config.output_format
    try:
        return get_adapter(fmt)
    except ValueError:
        bus.error(L.cli.error.format, format=fmt)
        raise typer.Exit(code=1)


def read_source(path: Path, config: DocthreadConfig) -> str:
    try:
        return path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        bus.error(L.cli.error.read, path=str(path), error=str(e))
        raise typer.Exit(code=1)


def write_output(path: Path, content: str, config: DocthreadConfig) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=config.encoding)
    except OSError as e:
        bus.error(L.cli.error.write, path=str(path), error=str(e))
        raise typer.Exit(code=1)
