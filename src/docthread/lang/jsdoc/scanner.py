import re
from typing import Optional, Pattern, Union

IDENTIFIER_RE = re.compile(r"[a-zA-Z_$][a-zA-Z0-9_$]*")
WHITESPACE_RE = re.compile(r"\s*")
HORIZONTAL_WHITESPACE_RE = re.compile(r"[ \t]*")
LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)?")

OPENERS = {"(": ")", "[": "]", "{": "}"}
CLOSERS = set(OPENERS.values())
QUOTES = {'"', "'", "`"}

PatternLike = Union[str, Pattern[str]]


def _compile(pattern: PatternLike) -> Pattern[str]:
    if isinstance(pattern, str):
        return re.compile(re.escape(pattern))
    return pattern


class Scanner:
    """
    A mutable cursor over a string.

    Every `read_*` method is anchored at the current position and only
    advances when it succeeds. Plain strings passed to `read`, `match` and
    `find` are treated as literals; compiled patterns are used as-is.
    """

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"<Scanner pos={self.pos} of {len(self.text)}>"

    @property
    def eof(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def current(self) -> str:
        # Empty string at end of input
        return self.text[self.pos : self.pos + 1]

    def substring(self, start: int, end: Optional[int] = None) -> str:
        return self.text[start : self.pos if end is None else end]

    def mark(self) -> int:
        return self.pos

    def reset(self, mark: int) -> None:
        self.pos = mark

    # --- Regex primitives ---

    def match(self, pattern: PatternLike) -> Optional[re.Match]:
        """Anchored lookahead; never moves the cursor."""
        return _compile(pattern).match(self.text, self.pos)

    def read(self, pattern: PatternLike) -> Optional[re.Match]:
        m = self.match(pattern)
        if m:
            self.pos = m.end()
        return m

    def find(self, pattern: PatternLike) -> Optional[re.Match]:
        """Moves to the start of the next match, or leaves the cursor alone."""
        m = _compile(pattern).search(self.text, self.pos)
        if m:
            self.pos = m.start()
        return m

    # --- Token readers ---

    def skip_whitespace(self) -> str:
        return self.read(WHITESPACE_RE).group(0)

    def skip_horizontal_whitespace(self) -> str:
        return self.read(HORIZONTAL_WHITESPACE_RE).group(0)

    def read_char(self) -> str:
        ch = self.current
        if ch:
            self.pos += 1
        return ch

    def read_identifier(self) -> Optional[str]:
        m = self.read(IDENTIFIER_RE)
        return m.group(0) if m else None

    def read_to_next_line(self) -> str:
        """Reads the rest of the current line, including its terminator."""
        return self.read(LINE_RE).group(0)

    def read_string(self) -> Optional[str]:
        """
        Reads a quoted string starting at the cursor and returns its unescaped
        value. Returns None (cursor unchanged) if there is no terminated string.
        """
        quote = self.current
        if quote not in QUOTES:
            return None

        pos = self.pos + 1
        chars = []
        while pos < len(self.text):
            ch = self.text[pos]
            if ch == "\\" and pos + 1 < len(self.text):
                chars.append(self.text[pos + 1])
                pos += 2
                continue
            if ch == quote:
                self.pos = pos + 1
                return "".join(chars)
            chars.append(ch)
            pos += 1
        return None

    def read_nested(self) -> Optional[str]:
        """
        Reads a balanced (), [] or {} span, or a quoted string, starting at the
        cursor and returns the full source span including delimiters.

        Quoted strings inside the span are skipped as a unit so that brackets
        inside them do not count. Returns None (cursor unchanged) if the span is
        not closed or the closers do not match.
        """
        start = self.pos
        if self.current in QUOTES:
            if self.read_string() is None:
                return None
            return self.substring(start)

        if self.current not in OPENERS:
            return None

        stack = []
        while not self.eof:
            ch = self.current
            if ch in QUOTES:
                if self.read_string() is None:
                    break
                continue
            if ch in OPENERS:
                stack.append(OPENERS[ch])
            elif ch in CLOSERS:
                if ch != stack.pop():
                    break
                if not stack:
                    self.pos += 1
                    return self.substring(start)
            self.pos += 1

        self.pos = start
        return None
