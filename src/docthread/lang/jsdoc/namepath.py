import re
from typing import Iterable, List, Optional, Tuple, Union

from docthread.spec import NamePathElement
from .scanner import Scanner

PREFIX_RE = re.compile(r"[a-zA-Z]+:")
DELIMITER_RE = re.compile(r"[#.~]")
# A name path ends at whitespace, "}", "|" or the end of input.
TERMINATOR_RE = re.compile(r"[\s}|]|$")
SPECIAL_CHAR_RE = re.compile(r"[^a-zA-Z0-9_$@/]")

NamePath = Tuple[NamePathElement, ...]


def parse_name_path(t: Union[Scanner, str]) -> Optional[NamePath]:
    """
    Parses a name path like `module:foo.bar#"baz qux"~event:changed` at the
    scanner's position.

    If anything other than whitespace, `}`, `|` or the end of input follows the
    path, the scanner is restored and None is returned so the caller can try
    another interpretation.
    """
    if isinstance(t, str):
        t = Scanner(t)

    start = t.mark()
    elements: List[NamePathElement] = []
    delimiter: Optional[str] = None

    while True:
        m = t.read(PREFIX_RE)
        prefix = m.group(0) if m else None

        name = t.read_string()
        if name is None:
            name = t.read_identifier()
        if name is None:
            break

        elements.append(NamePathElement(name=name, prefix=prefix, delimiter=delimiter))

        m = t.read(DELIMITER_RE)
        if m:
            delimiter = m.group(0)
            continue

        if t.match(TERMINATOR_RE):
            return tuple(elements)

        break

    t.reset(start)
    return None


def parse_name_path_string(text: str) -> Optional[NamePath]:
    """Parses `text` only if the whole string is a single name path."""
    t = Scanner(text)
    namepath = parse_name_path(t)
    if namepath is None or not t.eof:
        return None
    return namepath


def escape_name_path_element(name: str) -> str:
    if not SPECIAL_CHAR_RE.search(name):
        return name
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_name_path(elements: Iterable[NamePathElement]) -> str:
    parts = []
    for element in elements:
        if element.delimiter:
            parts.append(element.delimiter)
        if element.prefix:
            parts.append(element.prefix)
        parts.append(escape_name_path_element(element.name))
    return "".join(parts)
