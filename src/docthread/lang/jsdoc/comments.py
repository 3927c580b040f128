import re
from typing import List, Tuple

from docthread.spec import CommentStripperProtocol

# Block comments span lines; line comments stop before the line terminator.
# Comment tokens inside string or regex literals are not told apart from real ones.
COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/|//[^\r\n]*")


def _find_bol(text: str, pos: int) -> int:
    while pos > 0 and text[pos - 1] not in "\r\n":
        pos -= 1
    return pos


def _find_eol(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] not in "\r\n":
        pos += 1
    return pos


def _find_bol_ws(text: str, pos: int) -> int:
    while pos > 0 and text[pos - 1] in " \t":
        pos -= 1
    return pos


def _find_eol_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t":
        pos += 1
    return pos


def _skip_eol(text: str, pos: int) -> int:
    if text.startswith("\r\n", pos):
        return pos + 2
    if pos < len(text) and text[pos] in "\r\n":
        return pos + 1
    return pos


def find_comment_ranges(text: str) -> List[Tuple[int, int]]:
    return [(m.start(), m.end()) for m in COMMENT_RE.finditer(text)]


def strip_comments(text: str) -> str:
    """
    Removes all C/C++ style comments from `text`.

    A comment that occupies whole lines is removed together with its line
    terminator; otherwise only the comment and the spaces around it go.
    """
    # Work backwards so earlier offsets stay valid.
    for start, end in reversed(find_comment_ranges(text)):
        pos = _find_bol_ws(text, start)
        stop = _find_eol_ws(text, end)
        if pos == _find_bol(text, start) and stop == _find_eol(text, end):
            stop = _skip_eol(text, stop)
        text = text[:pos] + text[stop:]
    return text


class JsCommentStripper(CommentStripperProtocol):
    def strip(self, source_code: str) -> str:
        return strip_comments(source_code)
