import typer

from docthread.common.messaging import Renderer

LEVEL_COLORS = {
    "debug": typer.colors.BRIGHT_BLACK,
    "success": typer.colors.GREEN,
    "error": typer.colors.RED,
}


class CliRenderer(Renderer):
    """Writes bus messages to stderr so stdout only ever holds command output."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str) -> None:
        if level == "debug" and not self.verbose:
            return
        if level == "error":
            message = f"error: {message}"
        typer.secho(message, fg=LEVEL_COLORS.get(level), err=True)
