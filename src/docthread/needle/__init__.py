from .pointer import L, SemanticPointer
from .runtime import LANG_ENV_VAR, Needle, find_project_root, needle
from .loader import load_catalog_dir

__all__ = [
    "L",
    "LANG_ENV_VAR",
    "SemanticPointer",
    "needle",
    "Needle",
    "find_project_root",
    "load_catalog_dir",
]
