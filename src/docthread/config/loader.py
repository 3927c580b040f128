import codecs
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

log = logging.getLogger(__name__)

OUTPUT_FORMATS = ("yaml", "json")


class ConfigError(Exception):
    pass


@dataclass
class DocthreadConfig:
    output_format: str = "yaml"
    encoding: str = "utf-8"
    source: Optional[Path] = None  # The pyproject.toml the values came from


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while current_dir.parent != current_dir:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def load_config_from_path(search_path: Path) -> DocthreadConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return DocthreadConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    docthread_data: Dict[str, Any] = data.get("tool", {}).get("docthread", {})
    if not docthread_data:
        log.debug(f"No [tool.docthread] table in {config_path}, using defaults")
        return DocthreadConfig()

    output_format = docthread_data.get("output_format", "yaml")
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"{config_path}: output_format must be one of {OUTPUT_FORMATS}, got {output_format!r}"
        )

    encoding = docthread_data.get("encoding", "utf-8")
    if not isinstance(encoding, str):
        raise ConfigError(f"{config_path}: encoding must be a string, got {encoding!r}")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"{config_path}: invalid encoding: {e}") from e

    return DocthreadConfig(
        output_format=output_format,
        encoding=encoding,
        source=config_path,
    )
