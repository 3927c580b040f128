from .messaging.bus import MessageBus, bus
from .interfaces import DocumentAdapter
from .adapters import JsonAdapter, YamlAdapter

ADAPTERS = {"yaml": YamlAdapter, "json": JsonAdapter}


def get_adapter(output_format: str) -> DocumentAdapter:
    try:
        return ADAPTERS[output_format]()
    except KeyError:
        raise ValueError(f"Unknown output format: {output_format}") from None


__all__ = [
    "bus",
    "MessageBus",
    "DocumentAdapter",
    "JsonAdapter",
    "YamlAdapter",
    "get_adapter",
]
