from typing import Any, Protocol


class DocumentAdapter(Protocol):
    def dump(self, data: Any) -> str: ...
