from typing import Any


class SemanticPointer:
    """
    A message key built through attribute access.

    `L.cli.strip.done` stands for the catalog key "cli.strip.done".
    """

    def __init__(self, *parts: str):
        self._parts = parts

    def __getattr__(self, name: str) -> "SemanticPointer":
        # Catalog keys never start with "_", so private and dunder lookups
        # keep their normal meaning.
        if name.startswith("_"):
            raise AttributeError(name)
        return SemanticPointer(*self._parts, name)

    def __str__(self) -> str:
        return ".".join(self._parts)

    def __repr__(self) -> str:
        return f"<SemanticPointer: '{self}'>"

    def __eq__(self, other: Any) -> bool:
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


L = SemanticPointer()
