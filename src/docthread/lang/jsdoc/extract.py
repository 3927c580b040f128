import logging
import re
from typing import List

from docthread.spec import DocComment, DocCommentExtractorProtocol, JsDocError
from .block import parse_block

log = logging.getLogger(__name__)

DOC_COMMENT_RE = re.compile(r"/\*\*(?!/)[\s\S]*?\*/")


def _with_indent(source: str, pos: int, end: int) -> str:
    # Include the block's own indentation so its lines dedent evenly.
    bol = source.rfind("\n", 0, pos) + 1
    prefix = source[bol:pos]
    if prefix.strip():
        return source[pos:end]
    return source[bol:end]


def extract_doc_comments(source: str, strict: bool = False) -> List[DocComment]:
    """
    Finds and parses every `/** ... */` block in `source`.

    A block that fails to parse is logged and skipped, unless `strict` is set,
    in which case the error propagates.
    """
    comments: List[DocComment] = []
    for m in DOC_COMMENT_RE.finditer(source):
        raw = m.group(0)
        try:
            sections = parse_block(_with_indent(source, m.start(), m.end()))
        except JsDocError as e:
            if strict:
                raise
            log.warning(f"Skipping malformed doc comment at offset {m.start()}: {e}")
            continue

        if sections is None:
            continue

        comments.append(
            DocComment(pos=m.start(), end=m.end(), raw=raw, sections=tuple(sections))
        )
    return comments


class JsDocCommentExtractor(DocCommentExtractorProtocol):
    def __init__(self, strict: bool = False):
        self.strict = strict

    def extract(self, source_code: str) -> List[DocComment]:
        return extract_doc_comments(source_code, strict=self.strict)
