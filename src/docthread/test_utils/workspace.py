import json
from pathlib import Path
from textwrap import dedent
from typing import Any, Dict, List

import tomli_w


class WorkspaceFactory:
    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._pyproject_data: Dict[str, Any] = {}

    def with_config(self, docthread_config: Dict[str, Any]) -> "WorkspaceFactory":
        tool = self._pyproject_data.setdefault("tool", {})
        tool["docthread"] = docthread_config
        return self

    def with_project_name(self, name: str) -> "WorkspaceFactory":
        project = self._pyproject_data.setdefault("project", {})
        project["name"] = name
        return self

    def with_source(self, path: str, content: str) -> "WorkspaceFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def with_messages(
        self, lang: str, messages: Dict[str, str]
    ) -> "WorkspaceFactory":
        """Adds project-level overrides for the message catalog."""
        self._files_to_create.append(
            {
                "path": f".docthread/needle/{lang}/overrides.json",
                "content": messages,
                "format": "json",
            }
        )
        return self

    def build(self) -> Path:
        if self._pyproject_data:
            self._files_to_create.append(
                {
                    "path": "pyproject.toml",
                    "content": self._pyproject_data,
                    "format": "toml",
                }
            )

        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)
            content = file_spec["content"]
            fmt = file_spec["format"]

            if fmt == "toml":
                with output_path.open("wb") as f:
                    tomli_w.dump(content, f)
            elif fmt == "json":
                output_path.write_text(json.dumps(content), encoding="utf-8")
            else:
                output_path.write_text(content, encoding="utf-8")

        return self.root_path
