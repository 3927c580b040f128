from .bus import SpyBus
from .workspace import WorkspaceFactory

__all__ = ["SpyBus", "WorkspaceFactory"]
