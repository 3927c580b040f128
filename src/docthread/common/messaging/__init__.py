from .bus import MessageBus, MessageId, Renderer

__all__ = ["MessageBus", "MessageId", "Renderer"]
