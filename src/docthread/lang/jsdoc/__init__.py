from .scanner import Scanner
from .comments import JsCommentStripper, strip_comments
from .params import parse_param_name
from .namepath import (
    escape_name_path_element,
    format_name_path,
    parse_name_path,
    parse_name_path_string,
)
from .inline import (
    JsInlineLinkParser,
    link_target,
    parse_inline,
    replace_inline,
    restore_inline,
)
from .block import TAG_ALIASES, JsDocBlockParser, normalize_tag, parse_block
from .extract import JsDocCommentExtractor, extract_doc_comments

__all__ = [
    "Scanner",
    "JsCommentStripper",
    "JsDocBlockParser",
    "JsDocCommentExtractor",
    "JsInlineLinkParser",
    "TAG_ALIASES",
    "escape_name_path_element",
    "extract_doc_comments",
    "format_name_path",
    "link_target",
    "normalize_tag",
    "parse_block",
    "parse_inline",
    "parse_name_path",
    "parse_name_path_string",
    "parse_param_name",
    "replace_inline",
    "restore_inline",
    "strip_comments",
]
