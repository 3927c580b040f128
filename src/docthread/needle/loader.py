import json
import logging
from pathlib import Path
from typing import Dict

log = logging.getLogger(__name__)


def load_catalog_dir(root_path: Path) -> Dict[str, str]:
    """
    Merges every `*.json` catalog below `root_path` into one flat mapping.

    Catalogs hold fully qualified keys ("cli.strip.done") at the top level.
    Files are read in path order, so a later file overrides an earlier one.
    """
    registry: Dict[str, str] = {}
    if not root_path.is_dir():
        return registry

    for path in sorted(root_path.rglob("*.json")):
        try:
            content = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning(f"Ignoring unreadable message catalog {path}: {e}")
            continue

        if not isinstance(content, dict):
            log.warning(f"Ignoring message catalog {path}: expected a JSON object")
            continue

        registry.update({key: str(value) for key, value in content.items()})

    return registry
