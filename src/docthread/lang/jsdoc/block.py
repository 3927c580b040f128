import logging
import re
from dataclasses import asdict, replace
from textwrap import dedent
from types import MappingProxyType
from typing import List, Mapping, Optional

from docthread.spec import (
    BlockParserProtocol,
    JsDocSyntaxError,
    MalformedBlockError,
    Section,
)
from .params import parse_param_name
from .scanner import Scanner

log = logging.getLogger(__name__)

# A close marker alone on its line is matched from the start of that line.
END_RE = re.compile(r"^\s*\*/|\*/", re.MULTILINE)
OPEN_RE = re.compile(r"/\*\* ?")
LEADING_STAR_RE = re.compile(r"[ \t]*\* ?")
DIRECTIVE_RE = re.compile(r"[ \t]*@([a-zA-Z][a-zA-Z0-9_$]*) ?")

TAG_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "arg": "param",
        "argument": "param",
        "prop": "property",
        "return": "returns",
    }
)

TYPED_TAGS = frozenset({"param", "returns", "property"})
NAMED_TAGS = frozenset({"param", "property"})


def normalize_tag(tag: str) -> str:
    return TAG_ALIASES.get(tag, tag)


def _read_directive(t: Scanner, tag: str) -> Section:
    section = Section(tag=tag)

    if tag in TYPED_TAGS and t.current == "{":
        type_span = t.read_nested()
        if type_span is None:
            raise JsDocSyntaxError("syntax error parsing JSDoc - missing '}'", t.pos)
        section = replace(section, type=type_span[1:-1])
        t.skip_horizontal_whitespace()

    if tag in NAMED_TAGS:
        spec = parse_param_name(t)
        if spec is not None:
            section = replace(section, **asdict(spec))
        t.skip_horizontal_whitespace()

    return section


def parse_block(block_text: str) -> Optional[List[Section]]:
    """
    Parses a JSDoc block comment into its sections.

    The first section (tag None) holds the description; each `@tag` directive
    starts a new section. `@param`, `@returns` and `@property` read a `{type}`,
    and `@param` and `@property` also read the parameter name.

    Returns None if the text does not open with `/**`. Raises
    MalformedBlockError if there is no closing `*/` and JsDocSyntaxError if a
    type is never closed.
    """
    text = dedent(block_text)

    end = END_RE.search(text)
    if end is None:
        raise MalformedBlockError(len(text))

    t = Scanner(text[: end.start()])

    t.skip_whitespace()
    if not t.read(OPEN_RE):
        return None

    bodies: List[Section] = [Section(tag=None)]
    lines: List[List[str]] = [[]]

    while not t.eof:
        lines[-1].append(t.read_to_next_line())

        t.read(LEADING_STAR_RE)

        m = t.read(DIRECTIVE_RE)
        if m:
            t.skip_horizontal_whitespace()
            tag = normalize_tag(m.group(1))
            bodies.append(_read_directive(t, tag))
            lines.append([])

    return [
        replace(section, text="".join(section_lines))
        for section, section_lines in zip(bodies, lines)
    ]


class JsDocBlockParser(BlockParserProtocol):
    def parse(self, block_text: str) -> Optional[List[Section]]:
        return parse_block(block_text)
