import json
from typing import Any

from docthread.common.interfaces import DocumentAdapter


class JsonAdapter(DocumentAdapter):
    def dump(self, data: Any) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
