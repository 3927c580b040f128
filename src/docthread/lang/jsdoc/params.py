import logging
from typing import Optional, Union

from docthread.spec import ParamSpec
from .scanner import Scanner

log = logging.getLogger(__name__)


def _read_suffixes(t: Scanner) -> bool:
    # Zero or more "[]" or ".identifier" suffixes
    while True:
        t.skip_horizontal_whitespace()

        if t.read("["):
            t.skip_horizontal_whitespace()
            if not t.read("]"):
                return False
            continue

        if t.read("."):
            t.skip_horizontal_whitespace()
            if not t.read_identifier():
                return False
            continue

        return True


def _read_default(t: Scanner) -> Optional[str]:
    start = t.pos
    while t.current != "]":
        if t.eof:
            return None
        # Nested constructs are taken whole so a "]" inside them can't end the span.
        if t.read_nested() is None:
            t.read_char()
    return t.substring(start)


def parse_param_name(t: Union[Scanner, str]) -> Optional[ParamSpec]:
    """
    Parses a JSDoc parameter name such as `name`, `opts.sub`, `items[].id`
    or `[name=default]` at the scanner's position.

    Returns None and restores the scanner if the text is not a valid name.
    """
    if isinstance(t, str):
        t = Scanner(t)

    mark = t.mark()
    t.skip_horizontal_whitespace()

    optional = t.read("[") is not None
    start = t.pos

    t.skip_horizontal_whitespace()
    name = t.read_identifier()
    if not name or not _read_suffixes(t):
        log.debug(f"No parameter name at offset {mark}")
        t.reset(mark)
        return None

    specifier = t.substring(start).strip()
    default = None

    if optional:
        t.skip_horizontal_whitespace()
        if t.read("="):
            t.skip_horizontal_whitespace()
            default = _read_default(t)
            if default is None:
                log.debug(f"Unterminated default value at offset {mark}")
                t.reset(mark)
                return None

        if not t.read("]"):
            log.debug(f"Unterminated optional parameter at offset {mark}")
            t.reset(mark)
            return None

    return ParamSpec(optional=optional, name=name, specifier=specifier, default=default)
