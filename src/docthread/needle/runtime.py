import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from .loader import load_catalog_dir
from .pointer import SemanticPointer

LANG_ENV_VAR = "DOCTHREAD_LANG"
DEFAULT_LANG = "en"


def find_project_root(start_dir: Optional[Path] = None) -> Path:
    """
    Finds the project root by searching upwards for common markers.
    Search priority: pyproject.toml -> .git
    """
    current_dir = (start_dir or Path.cwd()).resolve()
    while current_dir.parent != current_dir:
        if (current_dir / "pyproject.toml").is_file():
            return current_dir
        if (current_dir / ".git").is_dir():
            return current_dir
        current_dir = current_dir.parent
    return start_dir or Path.cwd()


class Needle:
    """
    Resolves semantic pointers to message templates.

    Each root may provide packaged catalogs in `needle/<lang>/` and project
    overrides in `.docthread/needle/<lang>/`. Later roots override earlier
    ones. The language comes from `DOCTHREAD_LANG`; keys missing there are
    looked up in English, and a key missing everywhere renders as itself.
    """

    def __init__(self, roots: List[Path]):
        self.roots = list(roots)
        self._catalogs: Dict[str, Dict[str, str]] = {}

    def _catalog(self, lang: str) -> Dict[str, str]:
        if lang not in self._catalogs:
            merged: Dict[str, str] = {}
            for root in self.roots:
                merged.update(load_catalog_dir(root / "needle" / lang))
                merged.update(load_catalog_dir(root / ".docthread" / "needle" / lang))
            self._catalogs[lang] = merged
        return self._catalogs[lang]

    def get(self, pointer: Union[SemanticPointer, str]) -> str:
        key = str(pointer)
        lang = os.getenv(LANG_ENV_VAR, DEFAULT_LANG)
        for candidate in (lang, DEFAULT_LANG):
            template = self._catalog(candidate).get(key)
            if template is not None:
                return template
        return key


# Packaged catalogs first, the current project's overrides win.
needle = Needle(
    roots=[Path(__file__).parent.parent / "common" / "assets", find_project_root()]
)
