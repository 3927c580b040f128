from typing import Any, Optional, Protocol, Union

from docthread.needle import Needle, SemanticPointer, needle

MessageId = Union[str, SemanticPointer]


class Renderer(Protocol):
    def render(self, message: str, level: str) -> None:
        """Presents one resolved message; `level` is a MessageBus method name."""
        ...


class MessageBus:
    """
    Sends user-facing messages, addressed by semantic pointer, to a renderer.

    Command output (stripped text, YAML, JSON) never passes through the bus.
    `debug` carries summaries that only a verbose renderer shows, `success`
    confirms a written file and `error` precedes a non-zero exit.
    """

    def __init__(self, catalog: Needle):
        self.catalog = catalog
        self._renderer: Optional[Renderer] = None

    def set_renderer(self, renderer: Renderer):
        self._renderer = renderer

    def _render(self, level: str, msg_id: MessageId, **kwargs: Any) -> None:
        if not self._renderer:
            return

        template = self.catalog.get(msg_id)
        try:
            message = template.format(**kwargs)
        except (KeyError, IndexError):
            message = f"<formatting_error for '{msg_id}'>"

        self._renderer.render(message, level)

    def debug(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("debug", msg_id, **kwargs)

    def success(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("success", msg_id, **kwargs)

    def error(self, msg_id: MessageId, **kwargs: Any) -> None:
        self._render("error", msg_id, **kwargs)


bus = MessageBus(needle)
