import logging
import re
from typing import List, Optional, Sequence

from docthread.spec import (
    InlineLinkParserProtocol,
    InlineReplacement,
    LinkDescriptor,
    LinkRenderer,
)
from .namepath import format_name_path, parse_name_path
from .scanner import Scanner

log = logging.getLogger(__name__)

OPEN_RE = re.compile(r"\{@")
KIND_RE = re.compile(r"(?:linkplain|linkcode|link)\b")
URL_RE = re.compile(r"[^ \t}|]+")
TITLE_RE = re.compile(r"[^}]*")
PLACEHOLDER_RE = re.compile(r"\{@link (\d+)\}")


def _parse_link(t: Scanner, pos: int) -> Optional[LinkDescriptor]:
    # The cursor sits just past "{@".
    m = t.read(KIND_RE)
    if not m:
        return None
    kind = m.group(0)

    t.skip_whitespace()

    url = None
    namepath = parse_name_path(t)
    if namepath is None:
        m = t.read(URL_RE)
        if not m:
            return None
        url = m.group(0)

    # Title may follow a "|" or just whitespace
    t.skip_whitespace()
    t.read("|")
    t.skip_whitespace()

    title = t.read(TITLE_RE).group(0).strip() or None

    if not t.read("}"):
        return None

    return LinkDescriptor(
        pos=pos,
        end=t.pos,
        kind=kind,
        title=title,
        url=url,
        namepath=namepath,
    )


def parse_inline(body: str) -> List[LinkDescriptor]:
    """
    Finds the `{@link}`, `{@linkplain}` and `{@linkcode}` directives in `body`.

    The target is parsed as a name path where possible and taken as a raw url
    otherwise. Malformed directives are skipped.
    """
    t = Scanner(body)
    links: List[LinkDescriptor] = []

    while t.find(OPEN_RE):
        pos = t.pos
        t.pos += 2

        link = _parse_link(t, pos)
        if link is None:
            log.debug(f"Ignoring malformed inline directive at offset {pos}")
            t.reset(pos + 2)
            continue

        links.append(link)

    return links


def replace_inline(body: str) -> InlineReplacement:
    """
    Replaces each inline link in `body` with a `{@link N}` placeholder, where N
    indexes the returned links.
    """
    links = parse_inline(body)
    parts = []
    pos = 0
    for index, link in enumerate(links):
        parts.append(body[pos : link.pos])
        parts.append(f"{{@link {index}}}")
        pos = link.end
    parts.append(body[pos:])

    return InlineReplacement(body="".join(parts), links=tuple(links))


def link_target(link: LinkDescriptor) -> str:
    """The link target as it would be written back into a comment."""
    if link.namepath is not None:
        return format_name_path(link.namepath)
    return link.url or ""


def restore_inline(
    body: str, links: Sequence[LinkDescriptor], render: LinkRenderer
) -> str:
    """Substitutes the placeholders written by `replace_inline` with `render(link)`."""

    def substitute(m: re.Match) -> str:
        index = int(m.group(1))
        if index >= len(links):
            return m.group(0)
        return render(links[index])

    return PLACEHOLDER_RE.sub(substitute, body)


class JsInlineLinkParser(InlineLinkParserProtocol):
    def parse(self, text: str) -> List[LinkDescriptor]:
        return parse_inline(text)

    def replace(self, text: str) -> InlineReplacement:
        return replace_inline(text)
