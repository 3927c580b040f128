from docthread.lang.jsdoc import (
    escape_name_path_element,
    extract_doc_comments,
    format_name_path,
    parse_block,
    parse_inline,
    parse_name_path,
    parse_param_name,
    replace_inline,
    strip_comments,
)

__all__ = [
    "escape_name_path_element",
    "extract_doc_comments",
    "format_name_path",
    "parse_block",
    "parse_inline",
    "parse_name_path",
    "parse_param_name",
    "replace_inline",
    "strip_comments",
]
